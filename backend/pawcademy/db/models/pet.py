"""Module: pet."""

from datetime import date

from sqlalchemy import Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pawcademy.db.base import Base


# Pet profile; customer_id is an application-level reference with no FK constraint.
class Pet(Base):
    __tablename__ = "pets"

    # Primary Key
    pet_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Owner
    customer_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    # Basic Info
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    species: Mapped[str] = mapped_column(String(50), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)

    # Optional Info
    breed: Mapped[str | None] = mapped_column(String(100), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
