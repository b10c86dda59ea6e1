"""Module: customers."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from pydantic import Field
from sqlalchemy import select
from sqlalchemy.orm import Session

from pawcademy.api.routes.bookings import BookingRecord
from pawcademy.api.routes.common import ApiModel, PathId, StoreInt, normalize_optional
from pawcademy.api.routes.deps import get_current_session, get_db, require_scope
from pawcademy.api.routes.pets import PetRecord
from pawcademy.core.errors import id_mismatch, not_found, store_errors
from pawcademy.core.security import ROLE_CUSTOMER, LoginSession
from pawcademy.db.models.booking import Booking
from pawcademy.db.models.customer import Customer
from pawcademy.db.models.pet import Pet

router = APIRouter()


class CustomerRecord(ApiModel):
    customer_id: StoreInt = 0
    # Required, but blank/missing values get a field-specific 400 instead of a binding error.
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    phone_num: str | None = Field(None, max_length=30)
    address: str | None = Field(None, max_length=255)


# -------------------------
# Helpers
# -------------------------
def _clean(payload: CustomerRecord) -> dict[str, str | None]:
    """
    Trim the identity fields and reject blanks, in first/last/phone order.

    An address that is empty after trimming is stored as NULL.
    """
    first_name = (payload.first_name or "").strip()
    last_name = (payload.last_name or "").strip()
    phone_num = (payload.phone_num or "").strip()

    if not first_name:
        raise HTTPException(status_code=400, detail="First name is required")
    if not last_name:
        raise HTTPException(status_code=400, detail="Last name is required")
    if not phone_num:
        raise HTTPException(status_code=400, detail="Phone number is required")

    return {
        "first_name": first_name,
        "last_name": last_name,
        "phone_num": phone_num,
        "address": normalize_optional(payload.address),
    }


def _require_customer(db: Session, customer_id: int) -> None:
    with store_errors(db, "Error retrieving customer"):
        exists = db.execute(select(Customer.customer_id).where(Customer.customer_id == customer_id)).first()
    if not exists:
        raise not_found("Customer", customer_id)


# -------------------------
# CRUD
# -------------------------

@router.get("", response_model=list[CustomerRecord], summary="List customers")
def list_customers(db: Session = Depends(get_db)):
    with store_errors(db, "Error retrieving customers"):
        return db.execute(select(Customer).order_by(Customer.customer_id)).scalars().all()


@router.get("/{customer_id}", response_model=CustomerRecord, summary="Get customer")
def get_customer(customer_id: PathId, db: Session = Depends(get_db)):
    with store_errors(db, "Error retrieving customer"):
        customer = db.execute(select(Customer).where(Customer.customer_id == customer_id)).scalar_one_or_none()
    if not customer:
        raise not_found("Customer", customer_id)
    return customer


@router.post("", status_code=201, response_model=CustomerRecord, summary="Create customer")
def create_customer(payload: CustomerRecord, request: Request, response: Response, db: Session = Depends(get_db)):
    customer = Customer(**_clean(payload))
    with store_errors(db, "Error creating customer"):
        db.add(customer)
        db.commit()
        db.refresh(customer)

    response.headers["Location"] = str(request.url_for("get_customer", customer_id=customer.customer_id))
    return customer


@router.put("/{customer_id}", status_code=204, summary="Replace customer")
def update_customer(customer_id: PathId, payload: CustomerRecord, db: Session = Depends(get_db)):
    if customer_id != payload.customer_id:
        raise id_mismatch()
    values = _clean(payload)

    with store_errors(db, "Error updating customer"):
        customer = db.get(Customer, customer_id)
        if not customer:
            raise not_found("Customer", customer_id)
        for field, value in values.items():
            setattr(customer, field, value)
        db.commit()
    return Response(status_code=204)


@router.delete("/{customer_id}", status_code=204, summary="Delete customer")
def delete_customer(customer_id: PathId, db: Session = Depends(get_db)):
    # Pets and bookings that reference the customer are kept.
    with store_errors(db, "Error deleting customer"):
        customer = db.get(Customer, customer_id)
        if not customer:
            raise not_found("Customer", customer_id)
        db.delete(customer)
        db.commit()
    return Response(status_code=204)


# -------------------------
# Customer-scoped views
# -------------------------

@router.get("/{customer_id}/pets", response_model=list[PetRecord], summary="Pets owned by a customer")
def list_customer_pets(
    customer_id: PathId,
    session: LoginSession = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    require_scope(session, ROLE_CUSTOMER, customer_id)
    _require_customer(db, customer_id)

    with store_errors(db, "Error retrieving pets"):
        stmt = select(Pet).where(Pet.customer_id == customer_id).order_by(Pet.pet_id)
        return db.execute(stmt).scalars().all()


@router.get("/{customer_id}/bookings", response_model=list[BookingRecord], summary="Bookings for a customer's pets")
def list_customer_bookings(
    customer_id: PathId,
    session: LoginSession = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    require_scope(session, ROLE_CUSTOMER, customer_id)
    _require_customer(db, customer_id)

    with store_errors(db, "Error retrieving bookings"):
        stmt = (
            select(Booking)
            .join(Pet, Pet.pet_id == Booking.pet_id)
            .where(Pet.customer_id == customer_id)
            .order_by(Booking.booking_id)
        )
        return db.execute(stmt).scalars().all()
