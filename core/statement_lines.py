"""
Transaction extraction from PDF statement text.

Two strategies are tried in order: a parser for the fixed-width
transaction table of Chase statements, and a generic line scanner. The
first strategy that finds anything supplies the whole result.
"""
import re
from typing import Callable, List, Optional, Tuple

from core.classify import detect_category, detect_service
from core.config import MIN_DESCRIPTION_LENGTH
from core.logger import redact_description, setup_logger
from core.normalize import collapse_whitespace, is_plausible_amount, parse_amount
from core.schema import Transaction

logger = setup_logger(__name__)

# Chase statements end the transaction section with this filler page
PAGE_BREAK_SENTINEL = "This Page Intentionally Left Blank"

# MM/DD, then the description, then the amount (optional sign and $, exactly two decimals)
BANK_LINE_RE = re.compile(r"^(\d{1,2}/\d{1,2})(.+?)(-?\$?\d{1,3}(?:,\d{3})*\.\d{2})")
PAGE_NUMBER_RE = re.compile(r"^Page \d+ of \d+$")
GARBLED_PAGE_NUMBER_RE = re.compile(r"^\d+ \d+Pageof$")
HEADER_WORD_RE = re.compile(r"^(DESCRIPTION|AMOUNT|BALANCE)$", re.IGNORECASE)

GENERIC_AMOUNT_RE = re.compile(r"\$?(\d+\.\d{2})")
GENERIC_DATE_RE = re.compile(r"\d{1,2}/\d{1,2}/\d{2,4}")

ExtractionStrategy = Callable[[str], List[Transaction]]


def _build_transaction(date: str, description: str, amount: float) -> Transaction:
    # Statement lines are classified by description only, whatever the sign
    return Transaction(
        date=date,
        description=description,
        amount=amount,
        category=detect_category(description),
        service=detect_service(description),
    )


def _is_noise_line(line: str) -> bool:
    return (
        not line
        or ("DATE" in line and "DESCRIPTION" in line)
        or "Beginning Balance" in line
        or bool(PAGE_NUMBER_RE.match(line))
        or bool(GARBLED_PAGE_NUMBER_RE.match(line))
    )


def extract_bank_statement_transactions(text: str) -> List[Transaction]:
    """
    Extract transactions from a Chase-style statement table.
    
    Only lines of the form "MM/DD <description> <amount>" are read.
    Scanning stops at the blank-page marker. Both charges and credits
    are kept with their sign.
    
    Args:
        text: Full extracted statement text
    
    Returns:
        Transactions in statement order
    """
    transactions = []
    
    for raw_line in text.split("\n"):
        line = raw_line.strip()
        
        if PAGE_BREAK_SENTINEL in line:
            break
        
        if _is_noise_line(line):
            continue
        
        match = BANK_LINE_RE.match(line)
        if not match:
            continue
        
        date, description, amount_token = match.group(1), match.group(2).strip(), match.group(3)
        
        if len(description) < MIN_DESCRIPTION_LENGTH or HEADER_WORD_RE.match(description):
            logger.debug(f"Skipping header-like line: {redact_description(line)}")
            continue
        
        amount = parse_amount(amount_token)
        if not is_plausible_amount(amount):
            logger.debug(f"Skipping implausible amount {amount}: {redact_description(line)}")
            continue
        
        transactions.append(_build_transaction(date, collapse_whitespace(description), amount))
    
    return transactions


def extract_generic_transactions(text: str) -> List[Transaction]:
    """
    Extract transactions from arbitrary statement text.
    
    Each line contributes its first dollar amount and first full date
    wherever they appear; the description is whatever remains once all
    amount and date tokens are removed.
    
    Args:
        text: Full extracted statement text
    
    Returns:
        Transactions in statement order
    """
    transactions = []
    
    for line in text.split("\n"):
        amount_match = GENERIC_AMOUNT_RE.search(line)
        if not amount_match:
            continue
        
        amount = parse_amount(amount_match.group(0))
        if not is_plausible_amount(amount):
            continue
        
        remainder = GENERIC_DATE_RE.sub("", GENERIC_AMOUNT_RE.sub("", line))
        description = collapse_whitespace(remainder)
        if len(description) <= MIN_DESCRIPTION_LENGTH:
            continue
        
        date_match = GENERIC_DATE_RE.search(line)
        date = date_match.group(0) if date_match else ""
        
        transactions.append(_build_transaction(date, description, amount))
    
    return transactions


# Tried in order; the first non-empty result wins
EXTRACTION_STRATEGIES: Tuple[Tuple[str, ExtractionStrategy], ...] = (
    ("bank_statement", extract_bank_statement_transactions),
    ("generic", extract_generic_transactions),
)


def extract_pdf_transactions(
    text: str,
    strategies: Optional[Tuple[Tuple[str, ExtractionStrategy], ...]] = None
) -> List[Transaction]:
    """
    Run extraction strategies in order and return the first non-empty result.
    
    Args:
        text: Full extracted statement text
        strategies: Override for the strategy chain
    
    Returns:
        Transactions from the first productive strategy, or an empty list
    """
    strategies = strategies or EXTRACTION_STRATEGIES
    
    for name, strategy in strategies:
        transactions = strategy(text)
        if transactions:
            logger.info(f"Strategy '{name}' extracted {len(transactions)} transactions")
            return transactions
        logger.info(f"Strategy '{name}' found no transactions")
    
    return []
