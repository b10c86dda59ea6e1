# backend/pawcademy/db/models/__init__.py

from pawcademy.db.models.customer import Customer
from pawcademy.db.models.pet import Pet
from pawcademy.db.models.trainer import Trainer
from pawcademy.db.models.employee import Employee
from pawcademy.db.models.training_class import TrainingClass
from pawcademy.db.models.booking import Booking
