# database/models.py
import uuid

from sqlalchemy import CheckConstraint, Column, Date, ForeignKey, Integer, String, Text, Uuid

from database.db_session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    email = Column(Text, unique=True, nullable=False)
    password = Column(Text, nullable=False)  # bcrypt hash, never plaintext


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    image_url = Column(String(255), nullable=False)


class Invoice(Base):
    __tablename__ = "invoices"
    __table_args__ = (CheckConstraint("status IN ('pending', 'paid')", name="invoices_status_check"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    customer_id = Column(Uuid, ForeignKey("customers.id"), nullable=False)
    amount = Column(Integer, nullable=False)  # cents
    status = Column(String(255), nullable=False)
    date = Column(Date, nullable=False)


class Revenue(Base):
    __tablename__ = "revenue"

    month = Column(String(4), primary_key=True)
    revenue = Column(Integer, nullable=False)
