"""Module: employees."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Request, Response
from pydantic import Field
from sqlalchemy import select
from sqlalchemy.orm import Session

from pawcademy.api.routes.common import ApiModel, PathId, StoreInt
from pawcademy.api.routes.deps import get_db
from pawcademy.core.errors import id_mismatch, not_found, store_errors
from pawcademy.db.models.employee import Employee

router = APIRouter()


class EmployeeRecord(ApiModel):
    employee_id: StoreInt = 0
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=30)
    position: str | None = Field(None, max_length=100)
    hire_date: date | None = None


def _apply(employee: Employee, payload: EmployeeRecord) -> None:
    employee.first_name = payload.first_name
    employee.last_name = payload.last_name
    employee.email = payload.email
    employee.phone = payload.phone
    employee.position = payload.position
    employee.hire_date = payload.hire_date


@router.get("", response_model=list[EmployeeRecord], summary="List employees")
def list_employees(db: Session = Depends(get_db)):
    with store_errors(db, "Error retrieving employees"):
        return db.execute(select(Employee).order_by(Employee.employee_id)).scalars().all()


@router.get("/{employee_id}", response_model=EmployeeRecord, summary="Get employee")
def get_employee(employee_id: PathId, db: Session = Depends(get_db)):
    with store_errors(db, "Error retrieving employee"):
        employee = db.execute(select(Employee).where(Employee.employee_id == employee_id)).scalar_one_or_none()
    if not employee:
        raise not_found("Employee", employee_id)
    return employee


@router.post("", status_code=201, response_model=EmployeeRecord, summary="Create employee")
def create_employee(payload: EmployeeRecord, request: Request, response: Response, db: Session = Depends(get_db)):
    employee = Employee()
    _apply(employee, payload)
    with store_errors(db, "Error creating employee"):
        db.add(employee)
        db.commit()
        db.refresh(employee)

    response.headers["Location"] = str(request.url_for("get_employee", employee_id=employee.employee_id))
    return employee


@router.put("/{employee_id}", status_code=204, summary="Replace employee")
def update_employee(employee_id: PathId, payload: EmployeeRecord, db: Session = Depends(get_db)):
    if employee_id != payload.employee_id:
        raise id_mismatch()

    with store_errors(db, "Error updating employee"):
        employee = db.get(Employee, employee_id)
        if not employee:
            raise not_found("Employee", employee_id)
        _apply(employee, payload)
        db.commit()
    return Response(status_code=204)


@router.delete("/{employee_id}", status_code=204, summary="Delete employee")
def delete_employee(employee_id: PathId, db: Session = Depends(get_db)):
    with store_errors(db, "Error deleting employee"):
        employee = db.get(Employee, employee_id)
        if not employee:
            raise not_found("Employee", employee_id)
        db.delete(employee)
        db.commit()
    return Response(status_code=204)
