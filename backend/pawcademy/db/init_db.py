from pawcademy.db.session import engine
from pawcademy.db.base import Base

# IMPORTANT: import models so they register with Base.metadata
import pawcademy.db.models  # noqa: F401


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
