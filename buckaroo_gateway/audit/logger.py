"""
Append-only audit trail for transaction requests.

Every lifecycle step of a transaction request gets an entry with:
  - Action (what happened)
  - Service and invoice (which payment it concerns)
  - Transaction key (once the gateway returned one)
  - Details (missing fields, status codes, error messages)
  - Timestamp (UTC)

Parameter values are never written here; customer data stays out of the
audit trail.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from buckaroo_gateway.models.audit import AuditLog

logger = logging.getLogger("buckaroo_gateway.audit")


async def log_event(
    session: AsyncSession,
    action: str,
    service: Optional[str] = None,
    invoice: Optional[str] = None,
    transaction_key: Optional[str] = None,
    details: Optional[dict[str, Any]] = None,
) -> AuditLog:
    """
    Create an immutable audit log entry and flush it.

    Args:
        session: Database session.
        action: What happened (e.g. "validation_failed", "transaction_decoded").
        service: Name of the payment service.
        invoice: Invoice number of the transaction.
        transaction_key: Key returned by the gateway.
        details: Arbitrary context (serialized to JSON).

    Returns:
        The created AuditLog record.
    """
    entry = AuditLog(
        action=action,
        service=service,
        invoice=invoice,
        transaction_key=transaction_key,
        details=json.dumps(details) if details else None,
        timestamp=datetime.now(timezone.utc),
    )
    session.add(entry)
    await session.flush()
    logger.info(
        "AUDIT | service=%s invoice=%s action=%s | %s",
        service or "-",
        invoice or "-",
        action,
        json.dumps(details)[:200] if details else "",
    )
    return entry
