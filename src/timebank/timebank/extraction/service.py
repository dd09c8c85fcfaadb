from __future__ import annotations

import logging

from .model import ExtractedPunch
from .pdf_reader import pdf_to_text
from .text_parser import extract_punch_fields

logger = logging.getLogger(__name__)


class DocumentExtractor:
    """Use case: turn an uploaded punch receipt into raw punch fields."""

    def extract_text(self, text: str) -> ExtractedPunch:
        return extract_punch_fields(text)

    def extract(self, data: bytes) -> ExtractedPunch:
        text = pdf_to_text(data)
        fields = self.extract_text(text)
        logger.debug("Extracted fields id=%s date=%s time=%s", fields.employee_id, fields.date, fields.time)
        return fields
