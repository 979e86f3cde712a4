"""SQLAlchemy models for the transaction audit trail."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditLog(Base):
    """
    Immutable audit trail entry.

    One entry per lifecycle step of a transaction request: validation
    failure, submission, transport failure and decoding. Entries are
    append-only and never modified.
    """

    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    action = Column(String(50), nullable=False)
    service = Column(String(50), nullable=True, index=True)
    invoice = Column(String(100), nullable=True, index=True)
    transaction_key = Column(String(100), nullable=True, index=True)
    details = Column(Text, nullable=True)
    timestamp = Column(DateTime(timezone=True), default=_utcnow)
