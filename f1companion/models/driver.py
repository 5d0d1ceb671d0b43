from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from f1companion.db.base import Base, Timestamps


class Driver(Base, Timestamps):
    __tablename__ = "drivers"

    id: Mapped[int] = mapped_column(primary_key=True)
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))
    # three-letter code, e.g. VER
    abbreviation: Mapped[str] = mapped_column(String(3), unique=True)
    country_abbreviation: Mapped[str] = mapped_column(String(3))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
