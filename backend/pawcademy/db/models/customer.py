"""Module: customer."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pawcademy.db.base import Base


# Paying client who owns pets and logs in with name + phone.
class Customer(Base):
    __tablename__ = "customers"

    customer_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone_num: Mapped[str] = mapped_column(String(30), nullable=False)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
