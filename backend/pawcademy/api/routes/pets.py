"""Module: pets."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Request, Response
from pydantic import Field
from sqlalchemy import select
from sqlalchemy.orm import Session

from pawcademy.api.routes.common import ApiModel, PathId, StoreInt
from pawcademy.api.routes.deps import get_db
from pawcademy.core.errors import id_mismatch, not_found, store_errors
from pawcademy.db.models.pet import Pet

router = APIRouter()


class PetRecord(ApiModel):
    pet_id: StoreInt = 0
    customer_id: StoreInt
    name: str = Field(max_length=100)
    species: str = Field(max_length=50)
    birth_date: date
    breed: str | None = Field(None, max_length=100)
    notes: str | None = None


def _apply(pet: Pet, payload: PetRecord) -> None:
    pet.customer_id = payload.customer_id
    pet.name = payload.name
    pet.species = payload.species
    pet.birth_date = payload.birth_date
    pet.breed = payload.breed
    pet.notes = payload.notes


# -------------------------
# Endpoints
# -------------------------

@router.get("", response_model=list[PetRecord], summary="List pets")
def list_pets(db: Session = Depends(get_db)):
    with store_errors(db, "Error retrieving pets"):
        return db.execute(select(Pet).order_by(Pet.pet_id)).scalars().all()


@router.get("/{pet_id}", response_model=PetRecord, summary="Get pet detail")
def get_pet(pet_id: PathId, db: Session = Depends(get_db)):
    with store_errors(db, "Error retrieving pet"):
        pet = db.execute(select(Pet).where(Pet.pet_id == pet_id)).scalar_one_or_none()
    if not pet:
        raise not_found("Pet", pet_id)
    return pet


@router.post("", status_code=201, response_model=PetRecord, summary="Create pet")
def create_pet(payload: PetRecord, request: Request, response: Response, db: Session = Depends(get_db)):
    pet = Pet()
    _apply(pet, payload)
    with store_errors(db, "Error creating pet"):
        db.add(pet)
        db.commit()
        db.refresh(pet)

    response.headers["Location"] = str(request.url_for("get_pet", pet_id=pet.pet_id))
    return pet


@router.put("/{pet_id}", status_code=204, summary="Replace pet")
def update_pet(pet_id: PathId, payload: PetRecord, db: Session = Depends(get_db)):
    if pet_id != payload.pet_id:
        raise id_mismatch()

    with store_errors(db, "Error updating pet"):
        pet = db.get(Pet, pet_id)
        if not pet:
            raise not_found("Pet", pet_id)
        _apply(pet, payload)
        db.commit()
    return Response(status_code=204)


@router.delete("/{pet_id}", status_code=204, summary="Delete pet")
def delete_pet(pet_id: PathId, db: Session = Depends(get_db)):
    with store_errors(db, "Error deleting pet"):
        pet = db.get(Pet, pet_id)
        if not pet:
            raise not_found("Pet", pet_id)
        db.delete(pet)
        db.commit()
    return Response(status_code=204)
