"""
PDF text extraction using pdfplumber.
Page count is capped so a hostile PDF cannot run up parsing time.
"""
import io
from typing import Optional

import pdfplumber

from core.config import get_settings
from core.exceptions import TextExtractionError
from core.logger import setup_logger

logger = setup_logger(__name__)


def extract_pdf_text(content: bytes, max_pages: Optional[int] = None) -> str:
    """
    Extract plain text from the first pages of a PDF.
    
    Args:
        content: Raw PDF bytes
        max_pages: Maximum pages to read (defaults to configured value)
    
    Returns:
        Page texts joined by newlines
    
    Raises:
        TextExtractionError: If the PDF cannot be read
    """
    max_pages = max_pages or get_settings().max_pdf_pages
    
    try:
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            total_pages = len(pdf.pages)
            page_texts = []
            for page in pdf.pages[:max_pages]:
                page_texts.append(page.extract_text() or "")
    except Exception as e:
        logger.error(f"PDF text extraction failed: {e}")
        raise TextExtractionError(
            "Failed to extract text from PDF",
            details={"error": str(e)}
        )
    
    if total_pages > max_pages:
        logger.warning(f"PDF has {total_pages} pages, only the first {max_pages} were read")
    
    text = "\n".join(page_texts)
    logger.info(f"Extracted {len(text)} characters from {len(page_texts)} PDF pages")
    return text


def count_pdf_pages(content: bytes) -> int:
    """
    Count pages in a PDF.
    
    Raises:
        TextExtractionError: If the PDF cannot be read
    """
    try:
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            return len(pdf.pages)
    except Exception as e:
        raise TextExtractionError(
            "Failed to read PDF",
            details={"error": str(e)}
        )
