"""
Report aggregation.
Groups transactions by category and totals expenses.
"""
from typing import Dict, List, Sequence

from core.logger import setup_logger
from core.schema import AccountType, ProcessedData, Transaction

logger = setup_logger(__name__)


def expense_total(transactions: Sequence[Transaction]) -> float:
    """Sum the magnitudes of negative (expense) amounts."""
    return sum(abs(t.amount) for t in transactions if t.amount < 0)


def organize_data(transactions: Sequence[Transaction], account_type: AccountType) -> ProcessedData:
    """
    Build the report for one statement.
    
    Categories and services keep the order in which they first appear;
    transactions keep statement order inside each category. Income never
    counts toward the total.
    
    Args:
        transactions: Extracted transactions in statement order
        account_type: Caller-declared account type, passed through for display
    
    Returns:
        ProcessedData report
    """
    categories: Dict[str, List[Transaction]] = {}
    services: Dict[str, None] = {}
    
    for transaction in transactions:
        categories.setdefault(transaction.category, []).append(transaction)
        if transaction.service:
            services.setdefault(transaction.service, None)
    
    report = ProcessedData(
        total=expense_total(transactions),
        transactions=tuple(transactions),
        categories={name: tuple(items) for name, items in categories.items()},
        services=tuple(services),
        number_of_transactions=len(transactions),
        account_type=account_type,
    )
    
    logger.info(
        f"Built report: {report.number_of_transactions} transactions, "
        f"{len(report.categories)} categories, {len(report.services)} services"
    )
    return report
