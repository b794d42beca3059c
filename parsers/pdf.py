import io
import logging

import fitz  # PyMuPDF
from PyPDF2 import PdfReader

from errors import ExtractionFailure

logger = logging.getLogger(__name__)


def _read_pymupdf(data: bytes) -> str:
    with fitz.open(stream=data, filetype="pdf") as doc:
        return "\n".join(page.get_text("text") or "" for page in doc)


def _read_pypdf2(data: bytes) -> str:
    reader = PdfReader(io.BytesIO(data))
    return "\n".join(page.extract_text() or "" for page in reader.pages)


def pdf_to_text(data: bytes) -> str:
    """
    Extract text from an in-memory PDF.
    PyMuPDF first, PyPDF2 as the alternate. Raises ExtractionFailure when
    neither produces any text.
    """
    for name, reader in (("PyMuPDF", _read_pymupdf), ("PyPDF2", _read_pypdf2)):
        try:
            text = reader(data)
        except Exception as e:
            logger.warning(f"{name} extraction failed: {e}")
            continue
        if text.strip():
            logger.info(f"Extracted {len(text)} characters via {name}")
            return text
        logger.info(f"{name} returned no text")

    raise ExtractionFailure("Could not extract any text from the PDF")
