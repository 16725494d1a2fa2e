"""
FNOL document loading: PDF/TXT to plain text for the extractor.
Uses PyMuPDF for PDF, with pdfplumber as fallback. Pages are joined with a
blank line.
"""

import io
import logging
from pathlib import Path
from typing import Union

import fitz  # PyMuPDF
import pdfplumber

from .errors import UnsupportedInputError

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = (".txt", ".text")
PDF_SUFFIXES = (".pdf",)
PAGE_SEPARATOR = "\n\n"


def _pdf_text_pymupdf(data: bytes) -> str:
    with fitz.open(stream=data, filetype="pdf") as doc:
        return PAGE_SEPARATOR.join(page.get_text() for page in doc)


def _pdf_text_pdfplumber(data: bytes) -> str:
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        return PAGE_SEPARATOR.join(page.extract_text() or "" for page in pdf.pages)


def extract_text_from_bytes(data: bytes, filename: str) -> str:
    """
    Extract raw text from an uploaded PDF or TXT file's bytes.
    The filename's suffix decides the format.
    """
    suffix = Path(filename).suffix.lower()

    if suffix in TEXT_SUFFIXES:
        return data.decode("utf-8", errors="replace")

    if suffix in PDF_SUFFIXES:
        try:
            return _pdf_text_pymupdf(data)
        except Exception as e:
            logger.warning("PyMuPDF failed for %s: %s", filename, e)
            try:
                return _pdf_text_pdfplumber(data)
            except Exception as fallback_error:
                raise UnsupportedInputError(
                    f"Could not read PDF {filename}: {fallback_error}"
                ) from fallback_error

    raise UnsupportedInputError(
        f"Unsupported file type: {suffix or '(none)'}. Please upload a PDF or TXT file."
    )


def extract_text_from_file(file_path: Union[str, Path]) -> str:
    """Extract raw text from a PDF or TXT file on disk."""
    path = Path(file_path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise UnsupportedInputError(f"Could not read {path}: {e}") from e
    text = extract_text_from_bytes(data, path.name)
    logger.info("Loaded %d characters from %s", len(text), path.name)
    return text
