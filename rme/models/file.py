"""files table — metadata for objects stored in the bucket."""

from sqlalchemy import BigInteger, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from rme.core.database import Base, IdMixin, TimestampMixin


class File(IdMixin, TimestampMixin, Base):
    __tablename__ = "files"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(Text, nullable=False)
    extension: Mapped[str] = mapped_column(Text, nullable=False)
    size: Mapped[int] = mapped_column(BigInteger, nullable=False)
    path: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    uploader: Mapped[str] = mapped_column(
        Text, nullable=False, server_default=text("'unknown'")
    )
