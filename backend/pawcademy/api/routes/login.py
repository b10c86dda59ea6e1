"""Module: login."""

import logging

from fastapi import APIRouter, Depends, Header, HTTPException, Response
from sqlalchemy import select
from sqlalchemy.orm import Session

from pawcademy.api.routes.common import ApiModel
from pawcademy.api.routes.deps import get_current_session, get_db, get_token_value
from pawcademy.core.config import settings
from pawcademy.core.errors import store_errors
from pawcademy.core.security import (
    ROLE_ADMIN,
    ROLE_CUSTOMER,
    ROLE_TRAINER,
    LoginSession,
    sessions,
)
from pawcademy.db.models.customer import Customer
from pawcademy.db.models.employee import Employee
from pawcademy.db.models.trainer import Trainer

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_CREDENTIALS = "Invalid credentials. Please check your first name, last name, and phone number."


class LoginRequest(ApiModel):
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None


class LoginResponse(ApiModel):
    success: bool = True
    user_type: str
    user_id: int
    first_name: str
    last_name: str
    phone_number: str
    access_token: str
    token_type: str = "bearer"


def _as_login_response(session: LoginSession) -> LoginResponse:
    return LoginResponse(
        user_type=session.role,
        user_id=session.user_id,
        first_name=session.first_name,
        last_name=session.last_name,
        phone_number=session.phone_number,
        access_token=session.token,
    )


def resolve_login(db: Session, first_name: str, last_name: str, phone: str) -> LoginSession | None:
    """
    Resolve a name/phone triple to a role, first match wins:
    customer (name + phone), trainer (name + phone), then employee (name only)
    who is admitted as admin only when the phone equals the configured admin phone.
    """
    customer = db.execute(
        select(Customer).where(
            Customer.first_name == first_name,
            Customer.last_name == last_name,
            Customer.phone_num == phone,
        )
    ).scalars().first()
    if customer:
        return sessions.issue(ROLE_CUSTOMER, customer.customer_id, customer.first_name, customer.last_name, customer.phone_num)

    trainer = db.execute(
        select(Trainer).where(
            Trainer.first_name == first_name,
            Trainer.last_name == last_name,
            Trainer.phone_num == phone,
        )
    ).scalars().first()
    if trainer:
        return sessions.issue(ROLE_TRAINER, trainer.trainer_id, trainer.first_name, trainer.last_name, trainer.phone_num)

    employee = db.execute(
        select(Employee).where(
            Employee.first_name == first_name,
            Employee.last_name == last_name,
        )
    ).scalars().first()
    if employee and phone == settings.admin_phone:
        return sessions.issue(ROLE_ADMIN, employee.employee_id, employee.first_name, employee.last_name, phone)

    return None


@router.post("", response_model=LoginResponse, summary="Resolve name + phone to a role and open a session")
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    first_name = (payload.first_name or "").strip()
    last_name = (payload.last_name or "").strip()
    phone = (payload.phone_number or "").strip()
    if not first_name or not last_name or not phone:
        raise HTTPException(status_code=400, detail="First name, last name, and phone number are required")

    with store_errors(db, "Error during login"):
        session = resolve_login(db, first_name, last_name, phone)
    if not session:
        logger.warning("Login rejected for %s %s", first_name, last_name)
        raise HTTPException(status_code=401, detail=INVALID_CREDENTIALS)

    logger.info("Login as %s (id=%s)", session.role, session.user_id)
    return _as_login_response(session)


@router.get("/me", response_model=LoginResponse, summary="Session behind the bearer token")
def me(session: LoginSession = Depends(get_current_session)):
    return _as_login_response(session)


@router.post("/logout", status_code=204, summary="Revoke the bearer token")
def logout(authorization: str | None = Header(default=None)):
    sessions.revoke(get_token_value(authorization))
    return Response(status_code=204)
