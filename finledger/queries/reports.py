"""
Ledger Reports

DESIGN DECISION: Reports are pure functions over a sequence of transactions.
They never touch storage and never mutate their input, so LedgerStore can
hand them a snapshot and tests can call them on plain lists.

Ordering rules:
- Results keep store (insertion) order unless a function says otherwise.
- Sorting is always stable. Ties in a descending sort keep the order in
  which the tied items first appeared.
"""

from typing import Iterable, Sequence

from finledger.models.transaction import MonthlyReport, Transaction


def balance(transactions: Iterable[Transaction]) -> float:
    """Total income minus total expenses. 0 for an empty ledger."""
    return sum((t.signed_amount for t in transactions), 0.0)


def category_spending(transactions: Iterable[Transaction]) -> dict[str, float]:
    """
    Sum of expense amounts per category.

    Income is ignored. Categories are keyed in the order they first
    appear among expenses.
    """
    totals: dict[str, float] = {}
    for t in transactions:
        if t.is_expense:
            totals[t.category] = totals.get(t.category, 0.0) + t.amount
    return totals


def monthly_report(
    transactions: Iterable[Transaction],
    month: int,
    year: int,
    top_n: int = 5,
) -> MonthlyReport:
    """
    Summarize one calendar month.

    Transactions whose date text does not parse are skipped. A month
    outside 1-12 matches nothing and yields an empty report.
    `top_expense_categories` holds at most `top_n` categories, largest
    sum first; equal sums keep first-appearance order.
    """
    in_month = []
    for t in transactions:
        when = t.parsed_date()
        if when is not None and when.month == month and when.year == year:
            in_month.append(t)

    income = sum((t.amount for t in in_month if t.is_income), 0.0)
    expenses = sum((t.amount for t in in_month if t.is_expense), 0.0)

    by_category = category_spending(in_month)
    ranked = sorted(by_category.items(), key=lambda item: item[1], reverse=True)

    return MonthlyReport(
        month=month,
        year=year,
        income=income,
        expenses=expenses,
        net=income - expenses,
        transaction_count=len(in_month),
        top_expense_categories=dict(ranked[:max(top_n, 0)]),
    )


def search_transactions(
    transactions: Iterable[Transaction],
    query: str,
) -> list[Transaction]:
    """
    Case-insensitive substring search on description or category.

    An empty query matches every transaction.
    """
    return [t for t in transactions if t.matches(query)]


def recent_transactions(
    transactions: Sequence[Transaction],
    limit: int = 10,
) -> list[Transaction]:
    """
    Newest transactions first, at most `limit` of them.

    Dates are compared as ISO text. Transactions on the same day keep
    insertion order. A limit of zero or less returns nothing.
    """
    if limit <= 0:
        return []
    ordered = sorted(transactions, key=lambda t: t.date, reverse=True)
    return ordered[:limit]
