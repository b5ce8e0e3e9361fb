"""
Unit tests for report aggregation.
"""
import pytest
from pydantic import ValidationError

from core.aggregate import expense_total, organize_data
from core.schema import Transaction


def make_transaction(description, amount, category, service=None, date="01/01"):
    return Transaction(date=date, description=description, amount=amount, category=category, service=service)


@pytest.fixture
def transactions():
    return [
        make_transaction("NETFLIX.COM", -15.49, "Streaming", "Netflix"),
        make_transaction("PAYCHECK", 2000.0, "Income"),
        make_transaction("DOORDASH", -30.0, "Food", "DoorDash"),
        make_transaction("SPOTIFY", -11.99, "Streaming", "Spotify"),
        make_transaction("NETFLIX.COM", -15.49, "Streaming", "Netflix", date="02/01"),
        make_transaction("REFUND", 5.0, "Other"),
    ]


def test_total_counts_only_expenses(transactions):
    """Test income and other positive amounts never reach the total."""
    report = organize_data(transactions, "checking")
    assert report.total == pytest.approx(15.49 + 30.0 + 11.99 + 15.49)
    assert report.total == pytest.approx(expense_total(transactions))


def test_categories_in_first_occurrence_order(transactions):
    """Test category order follows first appearance."""
    report = organize_data(transactions, "checking")
    assert list(report.categories) == ["Streaming", "Income", "Food", "Other"]
    assert [t.service for t in report.categories["Streaming"]] == ["Netflix", "Spotify", "Netflix"]


def test_every_transaction_in_exactly_one_bucket(transactions):
    """Test grouping neither drops nor duplicates transactions."""
    report = organize_data(transactions, "credit")
    bucketed = [t for bucket in report.categories.values() for t in bucket]
    assert len(bucketed) == len(report.transactions)
    for transaction in report.transactions:
        assert sum(t is transaction for t in bucketed) == 1


def test_services_distinct_in_first_occurrence_order(transactions):
    """Test services are de-duplicated in order of appearance."""
    report = organize_data(transactions, "checking")
    assert report.services == ("Netflix", "DoorDash", "Spotify")


def test_report_metadata(transactions):
    """Test counts and account type pass through."""
    report = organize_data(transactions, "credit")
    assert report.number_of_transactions == 6
    assert report.account_type == "credit"
    assert list(report.transactions) == transactions


def test_empty_report():
    """Test no transactions gives an empty but valid report."""
    report = organize_data([], "checking")
    assert report.total == 0
    assert report.transactions == ()
    assert report.categories == {}
    assert report.services == ()
    assert report.number_of_transactions == 0


def test_report_is_independent_of_input(transactions):
    """Test changing the input list afterwards leaves the report alone."""
    report = organize_data(transactions, "checking")
    transactions.append(make_transaction("LATE", -1.0, "Other"))
    assert report.number_of_transactions == 6
    assert len(report.transactions) == 6
    assert len(report.categories["Other"]) == 1


def test_report_is_frozen(transactions):
    """Test report fields cannot be reassigned."""
    report = organize_data(transactions, "checking")
    with pytest.raises(ValidationError):
        report.total = 0.0
    with pytest.raises(ValidationError):
        report.transactions[0].amount = 1.0


def test_response_uses_contract_field_names(transactions):
    """Test the JSON shape matches what the frontend reads."""
    response = organize_data(transactions[:2], "checking").to_response()
    
    assert set(response) == {"total", "transactions", "categories", "services", "numberOfTransactions", "accountType"}
    assert response["transactions"][0] == {
        "date": "01/01",
        "description": "NETFLIX.COM",
        "amount": -15.49,
        "category": "Streaming",
        "service": "Netflix",
    }
    assert "service" not in response["transactions"][1]
    assert response["categories"]["Income"][0]["description"] == "PAYCHECK"
    assert response["services"] == ["Netflix"]
    assert response["numberOfTransactions"] == 2
    assert response["accountType"] == "checking"
