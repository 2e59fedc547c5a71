"""Tests for record shapes, fixtures and display conversion."""

from datetime import date
from uuid import UUID

import pytest
from pydantic import ValidationError

import placeholder_data
from definitions import CustomersTableType, Invoice, LatestInvoiceRaw, Revenue, User
from formatting import format_currency, to_formatted_customers_table, to_latest_invoice
from seeding.fixtures import PlaceholderFixtures

CUSTOMER_ID = "d6e15727-9fe1-4961-8c5b-ea44a9bd81aa"


class TestInvoiceShape:
    """Invoice status and amount validation."""

    @pytest.mark.unit
    @pytest.mark.parametrize("status", ["pending", "paid"])
    def test_allowed_statuses(self, status):
        invoice = Invoice(
            id="0b6f2a4e-5c1d-4e8a-9f3b-2d7c8e1a6b90",
            customer_id=CUSTOMER_ID,
            amount=500,
            date="2023-08-19",
            status=status,
        )
        assert invoice.status == status
        assert invoice.date == date(2023, 8, 19)
        assert invoice.customer_id == UUID(CUSTOMER_ID)

    @pytest.mark.unit
    @pytest.mark.parametrize("status", ["overdue", "PAID", ""])
    def test_other_statuses_rejected(self, status):
        with pytest.raises(ValidationError):
            Invoice(
                id="0b6f2a4e-5c1d-4e8a-9f3b-2d7c8e1a6b90",
                customer_id=CUSTOMER_ID,
                amount=500,
                date="2023-08-19",
                status=status,
            )

    @pytest.mark.unit
    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            Invoice(
                id="0b6f2a4e-5c1d-4e8a-9f3b-2d7c8e1a6b90",
                customer_id=CUSTOMER_ID,
                amount=-1,
                date="2023-08-19",
                status="paid",
            )


class TestOtherShapes:
    @pytest.mark.unit
    def test_revenue_month_is_short_code(self):
        with pytest.raises(ValidationError):
            Revenue(month="January", revenue=2000)

    @pytest.mark.unit
    def test_user_requires_valid_email(self):
        with pytest.raises(ValidationError):
            User(id="410544b2-4001-4271-9855-fec4b6a6442a", name="User", email="not-an-email", password="x")


class TestPlaceholderFixtures:
    """The bundled sample data is well formed."""

    @pytest.mark.unit
    def test_sizes(self):
        fixtures = PlaceholderFixtures()
        assert len(fixtures.users()) == 1
        assert len(fixtures.customers()) == 6
        assert len(fixtures.invoices()) == 13
        assert len(fixtures.revenue()) == 12

    @pytest.mark.unit
    def test_invoices_reference_known_customers(self):
        fixtures = PlaceholderFixtures()
        customer_ids = {c.id for c in fixtures.customers()}
        assert all(i.customer_id in customer_ids for i in fixtures.invoices())

    @pytest.mark.unit
    def test_invoice_ids_are_unique_and_stable(self):
        ids = [i["id"] for i in placeholder_data.invoices]
        assert len(set(ids)) == len(ids)
        first = placeholder_data.invoices[0]
        assert first["id"] == placeholder_data.invoice_id(
            first["customer_id"].upper(), first["date"], first["amount"], first["status"]
        )

    @pytest.mark.unit
    def test_revenue_months_unique(self):
        months = [r.month for r in PlaceholderFixtures().revenue()]
        assert len(set(months)) == len(months)


class TestFormatting:
    """Conversion from raw numeric views to display views."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "amount,expected",
        [(15795, "$157.95"), (0, "$0.00"), (5, "$0.05"), (123456789, "$1,234,567.89"), (-2500, "-$25.00")],
    )
    def test_format_currency(self, amount, expected):
        assert format_currency(amount) == expected

    @pytest.mark.unit
    def test_to_latest_invoice(self):
        raw = LatestInvoiceRaw(
            id="0b6f2a4e-5c1d-4e8a-9f3b-2d7c8e1a6b90",
            name="Evil Rabbit",
            image_url="/customers/evil-rabbit.png",
            email="evil@rabbit.com",
            amount=666,
        )

        latest = to_latest_invoice(raw)

        assert latest.amount == "$6.66"
        assert latest.name == raw.name
        assert latest.id == raw.id

    @pytest.mark.unit
    def test_to_formatted_customers_table(self):
        row = CustomersTableType(
            id=CUSTOMER_ID,
            name="Evil Rabbit",
            email="evil@rabbit.com",
            image_url="/customers/evil-rabbit.png",
            total_invoices=2,
            total_pending=16461,
            total_paid=0,
        )

        formatted = to_formatted_customers_table(row)

        assert formatted.total_pending == "$164.61"
        assert formatted.total_paid == "$0.00"
        assert formatted.total_invoices == 2
