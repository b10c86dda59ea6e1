"""Module: api."""

# backend/pawcademy/api/api.py
from fastapi import APIRouter

# Operational routes.
from pawcademy.api.routes.health import router as health_router
from pawcademy.api.routes.login import router as login_router

# One router per business resource. Prefixes keep the resource casing the client calls.
from pawcademy.api.routes.customers import router as customers_router
from pawcademy.api.routes.pets import router as pets_router
from pawcademy.api.routes.trainers import router as trainers_router
from pawcademy.api.routes.employees import router as employees_router
from pawcademy.api.routes.classes import router as classes_router
from pawcademy.api.routes.bookings import router as bookings_router


api_router = APIRouter()

api_router.include_router(health_router, prefix="/health", tags=["health"])
api_router.include_router(login_router, prefix="/Login", tags=["login"])

api_router.include_router(customers_router, prefix="/Customer", tags=["customers"])
api_router.include_router(pets_router, prefix="/Pet", tags=["pets"])
api_router.include_router(trainers_router, prefix="/Trainer", tags=["trainers"])
api_router.include_router(employees_router, prefix="/Employee", tags=["employees"])
api_router.include_router(classes_router, prefix="/Class", tags=["classes"])
api_router.include_router(bookings_router, prefix="/Booking", tags=["bookings"])
