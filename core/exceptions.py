"""
Custom exceptions for better error handling.
"""
from typing import Any, Dict, Optional


class StatementAnalyzerException(Exception):
    """Base exception for all statement analysis errors."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize exception.
        
        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class FileValidationError(StatementAnalyzerException):
    """Raised when an upload is rejected before parsing."""
    pass


class UnsupportedFileTypeError(FileValidationError):
    """Raised when a file is neither CSV nor PDF at dispatch time."""
    pass


class ParsingError(StatementAnalyzerException):
    """Raised when CSV tokenizing fails."""
    pass


class TextExtractionError(StatementAnalyzerException):
    """Raised when PDF text extraction fails."""
    pass


class FileProcessingError(StatementAnalyzerException):
    """Raised when file processing fails."""
    pass


class ConfigurationError(StatementAnalyzerException):
    """Raised when configuration is invalid."""
    pass
