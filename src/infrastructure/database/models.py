"""SQLAlchemy ORM models for loan records."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import (
    DateTime,
    Integer,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class LoanModel(Base):
    """Persisted loan record (one row per issuance or extension)."""

    __tablename__ = "loans"
    __table_args__ = (
        UniqueConstraint("loan_id", "sequence", name="uq_loans_loan_id_sequence"),
    )

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    loan_id: Mapped[str] = mapped_column(Uuid(as_uuid=False), nullable=False, index=True)
    principal_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    term_days: Mapped[int] = mapped_column(Integer, nullable=False)
    requested_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    due_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    sequence: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    superseded_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )