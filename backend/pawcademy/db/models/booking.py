"""Module: booking."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from pawcademy.db.base import Base


# A pet's reservation of a class slot, taken by an employee.
class Booking(Base):
    __tablename__ = "bookings"

    booking_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Application-level references; deleting the target leaves the booking in place.
    class_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    pet_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    employee_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    booking_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    status: Mapped[str] = mapped_column(String(100), nullable=False)  # Confirmed, Pending, Cancelled, Completed
    payment_status: Mapped[str] = mapped_column(String(100), nullable=False)  # Paid, Pending, Refunded
    amount_paid: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
