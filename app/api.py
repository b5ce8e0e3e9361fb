"""
FastAPI routes for statement upload and processing.
Uploads are processed in memory and nothing is kept after the response.
"""
import asyncio
from functools import partial
from typing import Any, Dict, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from core.config import get_settings
from core.exceptions import FileProcessingError, FileValidationError
from core.logger import setup_logger
from core.schema import ACCOUNT_TYPES
from core.validation import detect_file_kind, validate_file
from services.statement_service import StatementService

logger = setup_logger(__name__)
settings = get_settings()

# Initialize FastAPI app
app = FastAPI(
    title="Subscription Spending Analyzer",
    description="Categorize recurring subscription spending from bank statements",
    version="1.0.0"
)

# Service instance
statement_service = StatementService()


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "statement_analyzer",
        "version": "1.0.0"
    }


@app.get("/favicon.ico")
async def favicon():
    """Return empty response for favicon to avoid 404 errors."""
    return Response(status_code=204)


def validate_account_type(account_type: str) -> None:
    """
    Validate the declared account type.
    
    Raises:
        HTTPException: If the account type is unknown
    """
    if account_type not in ACCOUNT_TYPES:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid account type: {account_type}. Use 'checking' or 'credit'."
        )


async def run_pipeline(
    file: Optional[UploadFile],
    account_type: str,
    failure_message: str,
    require_pdf: bool = False
) -> Dict[str, Any]:
    """
    Read an upload and run it through the statement service.
    
    Args:
        file: Uploaded statement
        account_type: "checking" or "credit"
        failure_message: Generic message returned on unexpected failures
        require_pdf: Reject anything that is not a PDF
    
    Returns:
        Report as a JSON-ready dictionary
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file provided")
    
    validate_account_type(account_type)
    
    logger.info(f"Received file: {file.filename} ({file.content_type}), account type: {account_type}")
    
    # Reject oversized or mistyped uploads before buffering them
    if file.size is not None:
        validation = validate_file(file.filename, file.content_type, file.size)
        if not validation.valid:
            await file.close()
            raise HTTPException(status_code=400, detail=validation.error)
    
    content = await file.read()
    
    try:
        if require_pdf and detect_file_kind(file.filename, file.content_type) != "pdf":
            raise FileValidationError("Only PDF files are accepted on this endpoint")
        
        # Parsing is CPU-bound; keep it off the event loop
        loop = asyncio.get_running_loop()
        report = await loop.run_in_executor(
            None,
            partial(
                statement_service.process_file,
                content,
                file.filename,
                file.content_type,
                account_type,
            )
        )
    
    except FileValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    
    except FileProcessingError as e:
        logger.error(f"Processing failed for {file.filename}: {e.message} {e.details}")
        raise HTTPException(status_code=500, detail=failure_message)
    
    except Exception as e:
        logger.error(f"Unexpected error processing {file.filename}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=failure_message)
    
    finally:
        await file.close()
    
    return report.to_response()


@app.post("/process")
async def process_statement(
    file: Optional[UploadFile] = File(None),
    account_type: str = Form("checking", alias="accountType")
):
    """
    Process an uploaded CSV or PDF statement.
    
    Args:
        file: Statement file
        account_type: "checking" or "credit", used only for display
    
    Returns:
        Report with total, transactions, categories and services
    """
    return await run_pipeline(file, account_type, "Failed to process file")


@app.post("/api/process-pdf")
async def process_pdf_statement(
    file: Optional[UploadFile] = File(None),
    account_type: str = Form("checking", alias="accountType")
):
    """
    Process an uploaded PDF statement.
    
    Args:
        file: PDF statement
        account_type: "checking" or "credit", used only for display
    
    Returns:
        Report with total, transactions, categories and services
    """
    return await run_pipeline(file, account_type, "Failed to process PDF file", require_pdf=True)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
