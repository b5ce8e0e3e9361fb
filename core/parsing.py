"""
CSV statement parsing with header inference.
Bank exports use arbitrary column names, so the date, description and
amount columns are located by keyword with positional fallbacks.
"""
import io
from typing import Any, Dict, List, NamedTuple, Sequence

import pandas as pd

from core.classify import detect_category, detect_service
from core.exceptions import ParsingError
from core.keywords import INCOME_CATEGORY
from core.logger import setup_logger
from core.normalize import collapse_whitespace, parse_amount
from core.schema import Transaction

logger = setup_logger(__name__)

AMOUNT_HEADER_KEYWORDS = ("amount", "charge")
DATE_HEADER_KEYWORDS = ("date",)
DESCRIPTION_HEADER_KEYWORDS = ("description", "merchant", "name")


class ColumnMapping(NamedTuple):
    """Header names holding each transaction field."""
    date: str
    description: str
    amount: str


def _find_header(headers: Sequence[str], keywords: Sequence[str]) -> str:
    for header in headers:
        lower = header.lower()
        if any(keyword in lower for keyword in keywords):
            return header
    return ""


def _header_at(headers: Sequence[str], index: int) -> str:
    if not headers:
        return ""
    if index >= len(headers):
        return headers[-1]
    return headers[index]


def infer_columns(headers: Sequence[str]) -> ColumnMapping:
    """
    Infer which headers hold the date, description and amount.
    
    Header names are matched case-insensitively by substring. When no
    header matches, amount falls back to the last column, date to the
    first and description to the second.
    
    Args:
        headers: Header names in file order
    
    Returns:
        ColumnMapping with the chosen header names
    """
    headers = [str(h) for h in headers]
    
    amount = _find_header(headers, AMOUNT_HEADER_KEYWORDS) or _header_at(headers, len(headers) - 1)
    date = _find_header(headers, DATE_HEADER_KEYWORDS) or _header_at(headers, 0)
    description = _find_header(headers, DESCRIPTION_HEADER_KEYWORDS) or _header_at(headers, 1)
    
    return ColumnMapping(date=date, description=description, amount=amount)


def read_csv_rows(content: bytes) -> List[Dict[str, str]]:
    """
    Read CSV bytes into header-keyed rows.
    
    Args:
        content: Raw uploaded bytes
    
    Returns:
        List of row dictionaries, all values as strings
    
    Raises:
        ParsingError: If the CSV cannot be tokenized
    """
    text = content.decode("utf-8-sig", errors="replace")
    if not text.strip():
        return []
    
    try:
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            on_bad_lines="skip",
            index_col=False,
        )
    except pd.errors.EmptyDataError:
        return []
    except (pd.errors.ParserError, ValueError) as e:
        logger.error(f"Failed to parse CSV: {e}")
        raise ParsingError(
            "Invalid CSV format",
            details={"error": str(e)}
        )
    
    # Short rows come back with NaN in the missing cells
    df = df.fillna("")
    
    # Remove rows with no content in any column
    df = df[(df != "").any(axis=1)]
    
    logger.info(f"Parsed {len(df)} CSV rows with columns {list(df.columns)}")
    return df.to_dict(orient="records")


def _cell_text(row: Dict[str, Any], key: str) -> str:
    value = row.get(key)
    if value is None:
        return ""
    return str(value)


def extract_csv_transactions(rows: Sequence[Dict[str, Any]]) -> List[Transaction]:
    """
    Build transactions from header-keyed CSV rows.
    
    Rows whose amount parses to zero are skipped. Positive amounts are
    always categorized as income; everything else is classified by
    description.
    
    Args:
        rows: Rows as produced by read_csv_rows
    
    Returns:
        Transactions in file order
    """
    transactions = []
    skipped = 0
    
    for row in rows:
        columns = infer_columns(list(row.keys()))
        
        amount = parse_amount(row.get(columns.amount) or 0)
        if amount == 0:
            skipped += 1
            continue
        
        description = collapse_whitespace(_cell_text(row, columns.description))
        date = _cell_text(row, columns.date)
        category = INCOME_CATEGORY if amount > 0 else detect_category(description)
        
        transactions.append(Transaction(
            date=date,
            description=description,
            amount=amount,
            category=category,
            service=detect_service(description),
        ))
    
    logger.info(f"Extracted {len(transactions)} CSV transactions ({skipped} rows skipped)")
    return transactions
