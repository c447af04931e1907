"""insurances table."""

from sqlalchemy import Text, text
from sqlalchemy.orm import Mapped, mapped_column

from rme.core.database import Base, IdMixin, TimestampMixin


class Insurance(IdMixin, TimestampMixin, Base):
    __tablename__ = "insurances"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(Text, nullable=False)
    code: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("'active'"))
