"""Module: trainer."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pawcademy.db.base import Base


class Trainer(Base):
    __tablename__ = "trainers"

    trainer_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone_num: Mapped[str] = mapped_column(String(30), nullable=False)
    speciality: Mapped[str | None] = mapped_column(String(100), nullable=True)
