"""services table (clinic services offered, not the service layer)."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from rme.core.database import Base, IdMixin, TimestampMixin


class Service(IdMixin, TimestampMixin, Base):
    __tablename__ = "services"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    sub_category: Mapped[str] = mapped_column(Text, nullable=False)
