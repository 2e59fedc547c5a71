# formatting.py
from definitions import (
    CustomersTableType,
    FormattedCustomersTable,
    LatestInvoice,
    LatestInvoiceRaw,
)


def format_currency(amount: int) -> str:
    """Render an amount in cents as US dollars, e.g. 15795 -> '$157.95'."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount) / 100:,.2f}"


def to_latest_invoice(raw: LatestInvoiceRaw) -> LatestInvoice:
    data = raw.model_dump()
    data["amount"] = format_currency(raw.amount)
    return LatestInvoice(**data)


def to_formatted_customers_table(row: CustomersTableType) -> FormattedCustomersTable:
    data = row.model_dump()
    data["total_pending"] = format_currency(row.total_pending)
    data["total_paid"] = format_currency(row.total_paid)
    return FormattedCustomersTable(**data)
