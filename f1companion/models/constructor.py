from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from f1companion.db.base import Base, Timestamps


class Constructor(Base, Timestamps):
    __tablename__ = "constructors"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), unique=True)
    full_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    country_abbreviation: Mapped[str] = mapped_column(String(3))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
