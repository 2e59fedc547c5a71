# definitions.py
"""
Data shapes shared by the database and the presentation layer.

The raw variants carry amounts as integer cents the way the database returns
them; the formatted variants carry display strings produced by
`formatting.py`.
"""
from datetime import date
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

# An invoice is either awaiting payment or settled, nothing else.
InvoiceStatus = Literal["pending", "paid"]


# ------------------------------
# Stored records
# ------------------------------
class User(BaseModel):
    id: UUID
    name: str
    email: EmailStr
    password: str


class Customer(BaseModel):
    id: UUID
    name: str
    email: EmailStr
    image_url: str


class Invoice(BaseModel):
    id: UUID
    customer_id: UUID
    amount: int = Field(ge=0)
    date: date
    status: InvoiceStatus


class Revenue(BaseModel):
    month: str = Field(min_length=1, max_length=4)
    revenue: int


# ------------------------------
# Derived views
# ------------------------------
class LatestInvoice(BaseModel):
    id: UUID
    name: str
    image_url: str
    email: EmailStr
    amount: str


class LatestInvoiceRaw(BaseModel):
    """LatestInvoice with `amount` still in cents."""

    id: UUID
    name: str
    image_url: str
    email: EmailStr
    amount: int


class CustomersTableType(BaseModel):
    id: UUID
    name: str
    email: EmailStr
    image_url: str
    total_invoices: int
    total_pending: int
    total_paid: int


class FormattedCustomersTable(BaseModel):
    id: UUID
    name: str
    email: EmailStr
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str


class CustomerField(BaseModel):
    id: UUID
    name: str


class InvoiceForm(BaseModel):
    id: UUID
    customer_id: UUID
    amount: int
    status: InvoiceStatus
