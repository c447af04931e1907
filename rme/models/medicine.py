"""medicines table — one row per stocked batch."""

from datetime import date

from sqlalchemy import Date, Float, Text
from sqlalchemy.orm import Mapped, mapped_column

from rme.core.database import Base, IdMixin, TimestampMixin


class Medicine(IdMixin, TimestampMixin, Base):
    __tablename__ = "medicines"

    master_medicine_id: Mapped[str] = mapped_column(Text, nullable=False)
    batch_number: Mapped[str] = mapped_column(Text, nullable=False)
    trade_name: Mapped[str] = mapped_column(Text, nullable=False)
    production_date: Mapped[date] = mapped_column(Date, nullable=False)
    expired_date: Mapped[date] = mapped_column(Date, nullable=False)
    purchase_price: Mapped[float] = mapped_column(Float, nullable=False)
    selling_price: Mapped[float] = mapped_column(Float, nullable=False)
    qty: Mapped[float] = mapped_column(Float, nullable=False)
    manufacturer: Mapped[str] = mapped_column(Text, nullable=False)
