"""Module: seed_data."""

from faker import Faker
import csv
import random
from pathlib import Path
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from sqlalchemy import delete

from pawcademy.core.config import settings
from pawcademy.db.init_db import init_db
from pawcademy.db.session import SessionLocal

from pawcademy.db.models.customer import Customer
from pawcademy.db.models.pet import Pet
from pawcademy.db.models.trainer import Trainer
from pawcademy.db.models.employee import Employee
from pawcademy.db.models.training_class import TrainingClass
from pawcademy.db.models.booking import Booking

fake = Faker()

SPECIES_BREEDS = {
    "Dog": ["Labrador", "Border Collie", "Beagle", "Poodle", "Kelpie", None],
    "Cat": ["Siamese", "Ragdoll", "Burmese", None],
    "Rabbit": ["Holland Lop", None],
}
SPECIALITIES = ["Obedience", "Agility", "Puppy Training", "Grooming", "Behaviour"]
CLASS_TYPES = [
    # class type, category, base price
    ("Obedience", "Training", Decimal("180.00")),
    ("Agility", "Training", Decimal("220.00")),
    ("Puppy School", "Training", Decimal("150.00")),
    ("Full Groom", "Grooming", Decimal("95.00")),
    ("Wash & Tidy", "Grooming", Decimal("60.00")),
]
POSITIONS = ["Receptionist", "Groomer", "Kennel Hand", "Manager"]
BOOKING_STATUSES = ["Confirmed", "Pending", "Cancelled", "Completed"]
PAYMENT_STATUSES = ["Paid", "Pending", "Refunded"]


# Shared helpers used by multiple seed builders.
def generate_phone() -> str:
    return f"555-{random.randint(0, 9999):04d}"


def reset_db(session) -> None:
    # No FKs between the tables, so order only matters for readability.
    for model in (Booking, TrainingClass, Pet, Customer, Trainer, Employee):
        session.execute(delete(model))
    session.commit()


def seed_customers(session, n: int = 40) -> list[Customer]:
    customers = [
        Customer(
            first_name=fake.first_name(),
            last_name=fake.last_name(),
            phone_num=generate_phone(),
            address=fake.street_address() if random.random() < 0.8 else None,
        )
        for _ in range(n)
    ]
    session.add_all(customers)
    session.commit()
    return customers


def seed_pets(session, customers: list[Customer]) -> list[Pet]:
    pets: list[Pet] = []
    for customer in customers:
        for _ in range(random.randint(1, 3)):
            species = random.choice(list(SPECIES_BREEDS))
            pets.append(
                Pet(
                    customer_id=customer.customer_id,
                    name=fake.first_name(),
                    species=species,
                    birth_date=fake.date_between(start_date="-12y", end_date="-3m"),
                    breed=random.choice(SPECIES_BREEDS[species]),
                    notes=fake.sentence() if random.random() < 0.3 else None,
                )
            )
    session.add_all(pets)
    session.commit()
    return pets


def seed_trainers(session, n: int = 6) -> list[Trainer]:
    trainers = [
        Trainer(
            first_name=fake.first_name(),
            last_name=fake.last_name(),
            phone_num=generate_phone(),
            speciality=random.choice(SPECIALITIES),
        )
        for _ in range(n)
    ]
    session.add_all(trainers)
    session.commit()
    return trainers


def seed_employees(session, n: int = 5) -> list[Employee]:
    # First employee is the admin login: name from here, phone from settings.admin_phone.
    employees = [
        Employee(
            first_name="Alex",
            last_name="Admin",
            email="admin@pawcademy.example",
            phone=settings.admin_phone,
            position="Manager",
            hire_date=date(2020, 1, 6),
        )
    ]
    for _ in range(n - 1):
        first_name, last_name = fake.first_name(), fake.last_name()
        employees.append(
            Employee(
                first_name=first_name,
                last_name=last_name,
                email=f"{first_name}.{last_name}@pawcademy.example".lower(),
                phone=generate_phone() if random.random() < 0.9 else None,
                position=random.choice(POSITIONS),
                hire_date=fake.date_between(start_date="-6y", end_date="today"),
            )
        )
    session.add_all(employees)
    session.commit()
    return employees


def seed_classes(session, trainers: list[Trainer], per_trainer: int = 3) -> list[TrainingClass]:
    classes: list[TrainingClass] = []
    for trainer in trainers:
        for _ in range(per_trainer):
            class_type, category, base_price = random.choice(CLASS_TYPES)
            start_date = date.today() + timedelta(days=random.randint(-30, 60))
            start_hour = random.choice([8, 9, 10, 13, 15, 17])
            classes.append(
                TrainingClass(
                    trainer_id=trainer.trainer_id,
                    class_type=class_type,
                    title=f"{class_type} with {trainer.first_name}",
                    description=fake.paragraph(nb_sentences=2),
                    location=random.choice(["Main Hall", "Grooming Room 1", "Grooming Room 2", "Outdoor Yard"]),
                    start_time=time(start_hour, 0),
                    end_time=time(start_hour + 1, 30),
                    start_date=start_date,
                    end_date=start_date + timedelta(weeks=random.choice([0, 4, 6, 8])),
                    max_capacity=random.choice([1, 4, 6, 8, 10]),
                    price=base_price,
                    category=category,
                )
            )
    session.add_all(classes)
    session.commit()
    return classes


def seed_bookings(session, classes: list[TrainingClass], pets: list[Pet], employees: list[Employee], n: int = 80) -> int:
    bookings: list[Booking] = []
    for _ in range(n):
        training_class = random.choice(classes)
        payment_status = random.choice(PAYMENT_STATUSES)
        bookings.append(
            Booking(
                class_id=training_class.class_id,
                pet_id=random.choice(pets).pet_id,
                employee_id=random.choice(employees).employee_id,
                booking_date=datetime.combine(training_class.start_date, time(0)) - timedelta(days=random.randint(1, 21)),
                status=random.choice(BOOKING_STATUSES),
                payment_status=payment_status,
                amount_paid=training_class.price if payment_status == "Paid" else Decimal("0.00"),
            )
        )
    session.add_all(bookings)
    session.commit()
    return len(bookings)


def export_logins(customers: list[Customer], trainers: list[Trainer], employees: list[Employee]) -> Path:
    out_path = Path(__file__).resolve().parent / "seeded_logins.csv"
    with out_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["role", "id", "first_name", "last_name", "phone_number"])
        for c in customers[:5]:
            writer.writerow(["customer", c.customer_id, c.first_name, c.last_name, c.phone_num])
        for t in trainers:
            writer.writerow(["trainer", t.trainer_id, t.first_name, t.last_name, t.phone_num])
        admin = employees[0]
        writer.writerow(["admin", admin.employee_id, admin.first_name, admin.last_name, settings.admin_phone])
    return out_path


if __name__ == "__main__":
    # Full reseed: python -m pawcademy.scripts.seed_data
    init_db()
    session = SessionLocal()
    try:
        print("Resetting tables...")
        reset_db(session)

        print("Seeding customers + pets...")
        customers = seed_customers(session)
        pets = seed_pets(session, customers)

        print("Seeding trainers + classes...")
        trainers = seed_trainers(session)
        classes = seed_classes(session, trainers)

        print("Seeding employees + bookings...")
        employees = seed_employees(session)
        booking_n = seed_bookings(session, classes, pets, employees)

        logins_path = export_logins(customers, trainers, employees)
        print(
            f"Done. customers={len(customers)}, pets={len(pets)}, trainers={len(trainers)}, "
            f"classes={len(classes)}, employees={len(employees)}, bookings={booking_n}"
        )
        print(f"Login triples: {logins_path}")
    finally:
        session.close()
