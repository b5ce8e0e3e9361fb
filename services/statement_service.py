"""
Statement processing service.
Runs an uploaded file through validation, extraction, classification
and aggregation.
"""
from typing import Optional

from core.aggregate import organize_data
from core.config import get_settings
from core.exceptions import FileProcessingError, FileValidationError
from core.logger import setup_logger
from core.parsing import extract_csv_transactions, read_csv_rows
from core.pdf_text import extract_pdf_text
from core.schema import AccountType, ProcessedData
from core.statement_lines import extract_pdf_transactions
from core.validation import detect_file_kind, validate_file

logger = setup_logger(__name__)


class StatementService:
    """Service for turning one uploaded statement into a report."""
    
    def __init__(self):
        """Initialize statement service."""
        self.settings = get_settings()
    
    def process_csv(self, content: bytes, account_type: AccountType = "checking") -> ProcessedData:
        """
        Process a CSV export.
        
        Args:
            content: Raw CSV bytes
            account_type: Caller-declared account type
        
        Returns:
            Aggregated report
        """
        rows = read_csv_rows(content)
        transactions = extract_csv_transactions(rows)
        return organize_data(transactions, account_type)
    
    def process_text(self, text: str, account_type: AccountType = "checking") -> ProcessedData:
        """
        Process statement text that has already been extracted from a PDF.
        
        Args:
            text: Plain statement text
            account_type: Caller-declared account type
        
        Returns:
            Aggregated report
        """
        transactions = extract_pdf_transactions(text)
        return organize_data(transactions, account_type)
    
    def process_pdf(self, content: bytes, account_type: AccountType = "checking") -> ProcessedData:
        """
        Process a PDF statement.
        
        Args:
            content: Raw PDF bytes
            account_type: Caller-declared account type
        
        Returns:
            Aggregated report
        """
        text = extract_pdf_text(content, self.settings.max_pdf_pages)
        return self.process_text(text, account_type)
    
    def process_file(
        self,
        content: bytes,
        filename: Optional[str],
        content_type: Optional[str] = None,
        account_type: AccountType = "checking"
    ) -> ProcessedData:
        """
        Validate and process an uploaded statement.
        
        Args:
            content: Raw file bytes
            filename: Uploaded file name
            content_type: Declared MIME type
            account_type: "checking" or "credit"
        
        Returns:
            Aggregated report
        
        Raises:
            FileValidationError: If the upload is rejected
            FileProcessingError: If processing fails
        """
        validation = validate_file(filename, content_type, len(content))
        if not validation.valid:
            logger.warning(f"Rejected upload {filename}: {validation.error}")
            raise FileValidationError(
                validation.error or "Invalid file",
                details={"filename": filename, "size": len(content)}
            )
        
        kind = detect_file_kind(filename, content_type)
        logger.info(f"Processing {kind} file {filename} ({len(content)} bytes, {account_type} account)")
        
        try:
            if kind == "csv":
                report = self.process_csv(content, account_type)
            else:
                report = self.process_pdf(content, account_type)
        except Exception as e:
            logger.error(f"File processing failed for {filename}: {e}", exc_info=True)
            raise FileProcessingError(
                f"Failed to process {kind.upper()} file",
                details={"filename": filename, "error": str(e)}
            )
        
        if report.number_of_transactions == 0:
            logger.warning(f"No transactions found in {filename}")
        
        return report
