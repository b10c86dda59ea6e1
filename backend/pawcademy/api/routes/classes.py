"""Module: classes."""

from __future__ import annotations

from datetime import date, time

from fastapi import APIRouter, Depends, Request, Response
from pydantic import Field
from sqlalchemy import select
from sqlalchemy.orm import Session

from pawcademy.api.routes.common import ApiModel, Money, PathId, StoreInt
from pawcademy.api.routes.deps import get_db
from pawcademy.core.errors import id_mismatch, not_found, store_errors
from pawcademy.db.models.training_class import TrainingClass

router = APIRouter()


class ClassRecord(ApiModel):
    class_id: StoreInt = 0
    trainer_id: StoreInt
    class_type: str = Field(max_length=50)
    title: str = Field(max_length=150)
    description: str
    location: str = Field(max_length=150)
    start_time: time
    end_time: time
    start_date: date
    end_date: date
    max_capacity: StoreInt
    price: Money
    category: str | None = Field(None, max_length=50)


def _apply(item: TrainingClass, payload: ClassRecord) -> None:
    item.trainer_id = payload.trainer_id
    item.class_type = payload.class_type
    item.title = payload.title
    item.description = payload.description
    item.location = payload.location
    item.start_time = payload.start_time
    item.end_time = payload.end_time
    item.start_date = payload.start_date
    item.end_date = payload.end_date
    item.max_capacity = payload.max_capacity
    item.price = payload.price
    item.category = payload.category


@router.get("", response_model=list[ClassRecord], summary="List class offerings")
def list_classes(db: Session = Depends(get_db)):
    with store_errors(db, "Error retrieving classes"):
        return db.execute(select(TrainingClass).order_by(TrainingClass.class_id)).scalars().all()


@router.get("/{class_id}", response_model=ClassRecord, summary="Get class offering")
def get_class(class_id: PathId, db: Session = Depends(get_db)):
    with store_errors(db, "Error retrieving class"):
        item = db.execute(select(TrainingClass).where(TrainingClass.class_id == class_id)).scalar_one_or_none()
    if not item:
        raise not_found("Class", class_id)
    return item


@router.post("", status_code=201, response_model=ClassRecord, summary="Create class offering")
def create_class(payload: ClassRecord, request: Request, response: Response, db: Session = Depends(get_db)):
    item = TrainingClass()
    _apply(item, payload)
    with store_errors(db, "Error creating class"):
        db.add(item)
        db.commit()
        db.refresh(item)

    response.headers["Location"] = str(request.url_for("get_class", class_id=item.class_id))
    return item


@router.put("/{class_id}", status_code=204, summary="Replace class offering")
def update_class(class_id: PathId, payload: ClassRecord, db: Session = Depends(get_db)):
    if class_id != payload.class_id:
        raise id_mismatch()

    with store_errors(db, "Error updating class"):
        item = db.get(TrainingClass, class_id)
        if not item:
            raise not_found("Class", class_id)
        _apply(item, payload)
        db.commit()
    return Response(status_code=204)


@router.delete("/{class_id}", status_code=204, summary="Delete class offering")
def delete_class(class_id: PathId, db: Session = Depends(get_db)):
    # Bookings referencing this class are left in place.
    with store_errors(db, "Error deleting class"):
        item = db.get(TrainingClass, class_id)
        if not item:
            raise not_found("Class", class_id)
        db.delete(item)
        db.commit()
    return Response(status_code=204)
