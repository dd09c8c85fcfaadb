from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DurationPolicy
from ..core.exceptions import ValidationError
from .policies.accept_policy import AcceptStrategy
from .policies.base import DurationStrategy
from .policies.clamp_policy import ClampStrategy
from .policies.reject_policy import RejectStrategy


@dataclass
class DurationStrategyFactory:
    """Factory Pattern: map the configured policy name to its strategy."""

    def for_policy(self, policy: DurationPolicy | str) -> DurationStrategy:
        if not isinstance(policy, DurationPolicy):
            try:
                policy = DurationPolicy(str(policy).strip().lower())
            except ValueError as e:
                raise ValidationError(f"Política de duração desconhecida: {policy!r}") from e

        if policy == DurationPolicy.CLAMP:
            return ClampStrategy()
        if policy == DurationPolicy.REJECT:
            return RejectStrategy()
        return AcceptStrategy()
