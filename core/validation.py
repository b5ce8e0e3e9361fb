"""
Upload validation.
Runs before any parsing; error messages are shown to the user as-is.
"""
from typing import Literal, Optional

from core.config import ALLOWED_FILE_EXTENSIONS, ALLOWED_FILE_TYPES, get_settings
from core.exceptions import UnsupportedFileTypeError
from core.schema import ValidationResult

FileKind = Literal["csv", "pdf"]

INVALID_TYPE_MESSAGE = "Only CSV and PDF files are allowed"
UNSUPPORTED_TYPE_MESSAGE = "Unsupported file type. Please upload a CSV or PDF file."


def validate_file(filename: Optional[str], content_type: Optional[str], size: int) -> ValidationResult:
    """
    Validate file size and type.
    
    Either an allowed MIME type or an allowed extension is enough for
    the type check.
    
    Args:
        filename: Uploaded file name
        content_type: Declared MIME type
        size: File size in bytes
    
    Returns:
        ValidationResult with a user-facing error when invalid
    """
    settings = get_settings()
    
    if size > settings.max_file_size_bytes:
        return ValidationResult(
            valid=False,
            error=f"File size must be less than {settings.max_file_size_mb}MB",
        )
    
    name = (filename or "").lower()
    is_valid_type = (
        content_type in ALLOWED_FILE_TYPES
        or any(name.endswith(ext) for ext in ALLOWED_FILE_EXTENSIONS)
    )
    if not is_valid_type:
        return ValidationResult(valid=False, error=INVALID_TYPE_MESSAGE)
    
    return ValidationResult(valid=True)


def detect_file_kind(filename: Optional[str], content_type: Optional[str]) -> FileKind:
    """
    Decide which pipeline handles a validated file.
    
    Args:
        filename: Uploaded file name
        content_type: Declared MIME type
    
    Returns:
        "csv" or "pdf"
    
    Raises:
        UnsupportedFileTypeError: If the file is neither
    """
    name = (filename or "").lower()
    if content_type == "text/csv" or name.endswith(".csv"):
        return "csv"
    if content_type == "application/pdf" or name.endswith(".pdf"):
        return "pdf"
    raise UnsupportedFileTypeError(
        UNSUPPORTED_TYPE_MESSAGE,
        details={"filename": filename, "content_type": content_type}
    )
