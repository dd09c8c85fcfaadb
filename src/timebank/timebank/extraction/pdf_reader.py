from __future__ import annotations

import fitz  # PyMuPDF

from ..core.exceptions import ExtractionError


def pdf_to_text(data: bytes) -> str:
    """Concatenate the text of every page of an in-memory PDF."""
    if not data:
        raise ExtractionError("Arquivo PDF vazio.")

    try:
        with fitz.open(stream=data, filetype="pdf") as doc:
            return "".join(page.get_text() for page in doc)
    except (RuntimeError, ValueError) as e:
        raise ExtractionError(f"Não foi possível ler o PDF: {e}") from e
