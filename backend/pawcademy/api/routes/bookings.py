"""Module: bookings."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Request, Response
from pydantic import Field
from sqlalchemy import select
from sqlalchemy.orm import Session

from pawcademy.api.routes.common import ApiModel, Money, PathId, StoreInt
from pawcademy.api.routes.deps import get_db
from pawcademy.core.errors import id_mismatch, not_found, store_errors
from pawcademy.db.models.booking import Booking

router = APIRouter()


class BookingRecord(ApiModel):
    booking_id: StoreInt = 0
    class_id: StoreInt
    pet_id: StoreInt
    employee_id: StoreInt
    booking_date: datetime
    # Free text: Confirmed / Pending / Cancelled / Completed
    status: str = Field(max_length=100)
    # Free text: Paid / Pending / Refunded
    payment_status: str = Field(max_length=100)
    amount_paid: Money


def _apply(booking: Booking, payload: BookingRecord) -> None:
    booking.class_id = payload.class_id
    booking.pet_id = payload.pet_id
    booking.employee_id = payload.employee_id
    booking.booking_date = payload.booking_date
    booking.status = payload.status
    booking.payment_status = payload.payment_status
    booking.amount_paid = payload.amount_paid


@router.get("", response_model=list[BookingRecord], summary="List bookings")
def list_bookings(db: Session = Depends(get_db)):
    with store_errors(db, "Error retrieving bookings"):
        return db.execute(select(Booking).order_by(Booking.booking_id)).scalars().all()


@router.get("/{booking_id}", response_model=BookingRecord, summary="Get booking")
def get_booking(booking_id: PathId, db: Session = Depends(get_db)):
    with store_errors(db, "Error retrieving booking"):
        booking = db.execute(select(Booking).where(Booking.booking_id == booking_id)).scalar_one_or_none()
    if not booking:
        raise not_found("Booking", booking_id)
    return booking


@router.post("", status_code=201, response_model=BookingRecord, summary="Create booking")
def create_booking(payload: BookingRecord, request: Request, response: Response, db: Session = Depends(get_db)):
    booking = Booking()
    _apply(booking, payload)
    with store_errors(db, "Error creating booking"):
        db.add(booking)
        db.commit()
        db.refresh(booking)

    response.headers["Location"] = str(request.url_for("get_booking", booking_id=booking.booking_id))
    return booking


@router.put("/{booking_id}", status_code=204, summary="Replace booking")
def update_booking(booking_id: PathId, payload: BookingRecord, db: Session = Depends(get_db)):
    if booking_id != payload.booking_id:
        raise id_mismatch()

    with store_errors(db, "Error updating booking"):
        booking = db.get(Booking, booking_id)
        if not booking:
            raise not_found("Booking", booking_id)
        _apply(booking, payload)
        db.commit()
    return Response(status_code=204)


@router.delete("/{booking_id}", status_code=204, summary="Delete booking")
def delete_booking(booking_id: PathId, db: Session = Depends(get_db)):
    with store_errors(db, "Error deleting booking"):
        booking = db.get(Booking, booking_id)
        if not booking:
            raise not_found("Booking", booking_id)
        db.delete(booking)
        db.commit()
    return Response(status_code=204)
