"""
Unit tests for PDF statement line extraction.
"""
import pytest

from core.schema import Transaction
from core.statement_lines import (
    EXTRACTION_STRATEGIES,
    extract_bank_statement_transactions,
    extract_generic_transactions,
    extract_pdf_transactions,
)

CHASE_TEXT = """
ACCOUNT ACTIVITY
DATE OF TRANSACTION    MERCHANT NAME OR TRANSACTION DESCRIPTION    $ AMOUNT
Beginning Balance 1,204.33
01/15 NETFLIX.COM SUBSCRIPTION 15.49
01/16     SPOTIFY    USA     -$11.99
01/18 Payment Thank You - Web 1,250.00
Page 1 of 3
1 3Pageof
01/20 AB 3.00
01/21 BALANCE 44.00
01/22 TRANSFER TO SAVINGS 0.00
01/23 YEAR END BALANCE 250,000.00
This Page Intentionally Left Blank
01/25 HULU 7.99
"""


def test_bank_statement_scenario_line():
    """Test a single Chase line keeps its literal sign."""
    [transaction] = extract_bank_statement_transactions("01/15 NETFLIX.COM SUBSCRIPTION 15.49")
    assert transaction.date == "01/15"
    assert transaction.description == "NETFLIX.COM SUBSCRIPTION"
    assert transaction.amount == pytest.approx(15.49)
    assert transaction.service == "Netflix"
    assert transaction.category == "Streaming"


def test_bank_statement_negative_amount():
    """Test a leading minus is kept."""
    [transaction] = extract_bank_statement_transactions("01/16 SPOTIFY USA -$11.99")
    assert transaction.amount == pytest.approx(-11.99)
    assert transaction.service == "Spotify"


def test_bank_statement_full_page():
    """Test noise lines, filters and the blank-page stop."""
    transactions = extract_bank_statement_transactions(CHASE_TEXT)
    
    assert [t.description for t in transactions] == [
        "NETFLIX.COM SUBSCRIPTION",
        "SPOTIFY USA",
        "Payment Thank You - Web",
    ]
    assert [t.amount for t in transactions] == pytest.approx([15.49, -11.99, 1250.00])


def test_bank_statement_positive_amount_not_income():
    """Test credits are classified by description, never forced to income."""
    [transaction] = extract_bank_statement_transactions("02/01 DISCORD NITRO REFUND 9.99")
    assert transaction.amount > 0
    assert transaction.category == "Communication"


def test_bank_statement_stops_at_sentinel():
    """Test nothing after the blank-page marker is read."""
    text = "This Page Intentionally Left Blank\n01/25 HULU PLUS 7.99"
    assert extract_bank_statement_transactions(text) == []


def test_bank_statement_ignores_non_matching_lines():
    """Test lines without a leading MM/DD are skipped."""
    text = "Total fees charged 15.00\n2024-01-15 NETFLIX 15.49\nNETFLIX 01/15 15.49"
    assert extract_bank_statement_transactions(text) == []


def test_generic_extractor():
    """Test the fallback pulls amount and date from anywhere in the line."""
    text = "Purchase NETFLIX.COM 15.49 on 01/15/2024\nStatement summary\n$42.10 COINBASE 02/01/24"
    netflix, coinbase = extract_generic_transactions(text)
    
    assert netflix.date == "01/15/2024"
    assert netflix.description == "Purchase NETFLIX.COM on"
    assert netflix.amount == pytest.approx(15.49)
    assert netflix.service == "Netflix"
    
    assert coinbase.date == "02/01/24"
    assert coinbase.description == "COINBASE"
    assert coinbase.category == "Crypto"


def test_generic_extractor_filters():
    """Test short descriptions, zero amounts and balances are dropped."""
    text = "ABC 12.00\nFEE WAIVED 0.00\nCLOSING BALANCE 150000.00\nNo date here 8.50"
    [transaction] = extract_generic_transactions(text)
    assert transaction.description == "No date here"
    assert transaction.date == ""


def test_fallback_used_when_bank_strategy_empty():
    """Test the generic strategy supplies the result when the first finds nothing."""
    text = "Transaction on 03/04/2024 SPOTIFY PREMIUM 10.99"
    assert extract_bank_statement_transactions(text) == []
    
    transactions = extract_pdf_transactions(text)
    assert transactions == extract_generic_transactions(text)
    assert len(transactions) == 1


def test_fallback_not_used_when_bank_strategy_succeeds():
    """Test results from two strategies are never blended."""
    text = "01/15 NETFLIX.COM SUBSCRIPTION 15.49\nRandom line SPOTIFY 10.99 03/04/2024"
    transactions = extract_pdf_transactions(text)
    assert [t.service for t in transactions] == ["Netflix"]


def test_strategy_chain_order():
    """Test strategies run in declared order and stop at the first hit."""
    calls = []
    
    def empty(text):
        calls.append("empty")
        return []
    
    def found(text):
        calls.append("found")
        return [Transaction(date="", description="X", amount=-1.0, category="Other")]
    
    def never(text):
        calls.append("never")
        return []
    
    result = extract_pdf_transactions("text", strategies=(("empty", empty), ("found", found), ("never", never)))
    assert len(result) == 1
    assert calls == ["empty", "found"]


def test_no_strategy_finds_anything():
    """Test empty text yields an empty list."""
    assert extract_pdf_transactions("") == []


def test_declared_strategy_order():
    """Test the bank-specific strategy is tried first."""
    assert [name for name, _ in EXTRACTION_STRATEGIES] == ["bank_statement", "generic"]


def test_extracted_amounts_within_bounds():
    """Test no extracted amount is zero or balance-sized."""
    for strategy in (extract_bank_statement_transactions, extract_generic_transactions):
        for transaction in strategy(CHASE_TEXT):
            assert transaction.amount != 0
            assert abs(transaction.amount) <= 100000
