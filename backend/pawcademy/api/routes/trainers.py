"""Module: trainers."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response
from pydantic import Field
from sqlalchemy import select
from sqlalchemy.orm import Session

from pawcademy.api.routes.bookings import BookingRecord
from pawcademy.api.routes.classes import ClassRecord
from pawcademy.api.routes.common import ApiModel, PathId, StoreInt
from pawcademy.api.routes.deps import get_current_session, get_db, require_scope
from pawcademy.core.errors import id_mismatch, not_found, store_errors
from pawcademy.core.security import ROLE_TRAINER, LoginSession
from pawcademy.db.models.booking import Booking
from pawcademy.db.models.trainer import Trainer
from pawcademy.db.models.training_class import TrainingClass

router = APIRouter()


class TrainerRecord(ApiModel):
    trainer_id: StoreInt = 0
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    phone_num: str = Field(max_length=30)
    speciality: str | None = Field(None, max_length=100)


def _apply(trainer: Trainer, payload: TrainerRecord) -> None:
    trainer.first_name = payload.first_name
    trainer.last_name = payload.last_name
    trainer.phone_num = payload.phone_num
    trainer.speciality = payload.speciality


def _require_trainer(db: Session, trainer_id: int) -> None:
    with store_errors(db, "Error retrieving trainer"):
        exists = db.execute(select(Trainer.trainer_id).where(Trainer.trainer_id == trainer_id)).first()
    if not exists:
        raise not_found("Trainer", trainer_id)


# -------------------------
# CRUD
# -------------------------

@router.get("", response_model=list[TrainerRecord], summary="List trainers")
def list_trainers(db: Session = Depends(get_db)):
    with store_errors(db, "Error retrieving trainers"):
        return db.execute(select(Trainer).order_by(Trainer.trainer_id)).scalars().all()


@router.get("/{trainer_id}", response_model=TrainerRecord, summary="Get trainer")
def get_trainer(trainer_id: PathId, db: Session = Depends(get_db)):
    with store_errors(db, "Error retrieving trainer"):
        trainer = db.execute(select(Trainer).where(Trainer.trainer_id == trainer_id)).scalar_one_or_none()
    if not trainer:
        raise not_found("Trainer", trainer_id)
    return trainer


@router.post("", status_code=201, response_model=TrainerRecord, summary="Create trainer")
def create_trainer(payload: TrainerRecord, request: Request, response: Response, db: Session = Depends(get_db)):
    trainer = Trainer()
    _apply(trainer, payload)
    with store_errors(db, "Error creating trainer"):
        db.add(trainer)
        db.commit()
        db.refresh(trainer)

    response.headers["Location"] = str(request.url_for("get_trainer", trainer_id=trainer.trainer_id))
    return trainer


@router.put("/{trainer_id}", status_code=204, summary="Replace trainer")
def update_trainer(trainer_id: PathId, payload: TrainerRecord, db: Session = Depends(get_db)):
    if trainer_id != payload.trainer_id:
        raise id_mismatch()

    with store_errors(db, "Error updating trainer"):
        trainer = db.get(Trainer, trainer_id)
        if not trainer:
            raise not_found("Trainer", trainer_id)
        _apply(trainer, payload)
        db.commit()
    return Response(status_code=204)


@router.delete("/{trainer_id}", status_code=204, summary="Delete trainer")
def delete_trainer(trainer_id: PathId, db: Session = Depends(get_db)):
    with store_errors(db, "Error deleting trainer"):
        trainer = db.get(Trainer, trainer_id)
        if not trainer:
            raise not_found("Trainer", trainer_id)
        db.delete(trainer)
        db.commit()
    return Response(status_code=204)


# -------------------------
# Trainer-scoped views
# -------------------------

@router.get("/{trainer_id}/classes", response_model=list[ClassRecord], summary="Classes taught by a trainer")
def list_trainer_classes(
    trainer_id: PathId,
    session: LoginSession = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    require_scope(session, ROLE_TRAINER, trainer_id)
    _require_trainer(db, trainer_id)

    with store_errors(db, "Error retrieving classes"):
        stmt = (
            select(TrainingClass)
            .where(TrainingClass.trainer_id == trainer_id)
            .order_by(TrainingClass.class_id)
        )
        return db.execute(stmt).scalars().all()


@router.get("/{trainer_id}/bookings", response_model=list[BookingRecord], summary="Bookings for a trainer's classes")
def list_trainer_bookings(
    trainer_id: PathId,
    session: LoginSession = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    require_scope(session, ROLE_TRAINER, trainer_id)
    _require_trainer(db, trainer_id)

    with store_errors(db, "Error retrieving bookings"):
        stmt = (
            select(Booking)
            .join(TrainingClass, TrainingClass.class_id == Booking.class_id)
            .where(TrainingClass.trainer_id == trainer_id)
            .order_by(Booking.booking_id)
        )
        return db.execute(stmt).scalars().all()
