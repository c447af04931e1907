"""nurses table."""

from sqlalchemy import Text, text
from sqlalchemy.orm import Mapped, mapped_column

from rme.core.database import Base, IdMixin, TimestampMixin


class Nurse(IdMixin, TimestampMixin, Base):
    __tablename__ = "nurses"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    nip: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("'active'"))
