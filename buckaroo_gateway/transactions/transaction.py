"""
Transaction request: the orchestrator of a single gateway call.

The flow for one request:

  1. Validation (service mandatory fields, articles, amounts)
  2. Assembly (transaction fields + service records, flat list)
  3. Submission (through the transport; no retries here)
  4. Decoding (raw response -> TransactionResult)

A request is used once. Validation failures leave it configured so the
caller can fix the service and try again; once submitted it cannot be sent
a second time.
"""

import logging
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from buckaroo_gateway.audit.logger import log_event
from buckaroo_gateway.authentication import Authentication
from buckaroo_gateway.config import settings
from buckaroo_gateway.exceptions import (
    AmountError,
    MissingParameterError,
    TransactionStateError,
    TransportError,
    ValidationError,
)
from buckaroo_gateway.models.enums import TransactionState
from buckaroo_gateway.models.parameters import ParameterRecord
from buckaroo_gateway.results.transaction import TransactionResult
from buckaroo_gateway.services.base import Service
from buckaroo_gateway.transport.base import Transport

logger = logging.getLogger("buckaroo_gateway.transaction")

API_URL = "json/TransactionRequest"

# Transaction-level fields in the order they are sent: (attribute, wire name).
TRANSACTION_FIELDS = (
    ("currency", "Currency"),
    ("amount_debit", "AmountDebit"),
    ("amount_credit", "AmountCredit"),
    ("invoice", "Invoice"),
    ("order", "Order"),
    ("description", "Description"),
    ("client_ip", "ClientIP"),
    ("return_url", "ReturnURL"),
    ("return_url_cancel", "ReturnURLCancel"),
    ("return_url_error", "ReturnURLError"),
    ("return_url_reject", "ReturnURLReject"),
    ("original_transaction_key", "OriginalTransactionKey"),
    ("start_recurrent", "StartRecurrent"),
    ("push_url", "PushURL"),
    ("push_url_failure", "PushURLFailure"),
)


class TransactionRequest:
    """Combines credentials, one service and the transaction fields into one call."""

    def __init__(
        self,
        authentication: Authentication,
        service: Service,
        endpoint: str,
        transport: Transport,
        audit_session: Optional[AsyncSession] = None,
    ):
        self._authentication = authentication
        self._service = service
        self._endpoint = endpoint
        self._transport = transport
        self._audit_session = audit_session
        self._state = TransactionState.CONFIGURED

        self.currency = "EUR"
        self.amount_debit: Optional[Decimal] = None
        self.amount_credit: Optional[Decimal] = None
        self.invoice: Optional[str] = None
        self.order: Optional[str] = None
        self.description: Optional[str] = None
        self.client_ip: Optional[str] = None
        self.return_url: Optional[str] = None
        self.return_url_cancel: Optional[str] = None
        self.return_url_error: Optional[str] = None
        self.return_url_reject: Optional[str] = None
        self.original_transaction_key: Optional[str] = None
        self.start_recurrent = False
        self.push_url: Optional[str] = None
        self.push_url_failure: Optional[str] = None

    @property
    def state(self) -> TransactionState:
        return self._state

    @property
    def service(self) -> Service:
        return self._service

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def request(self) -> TransactionResult:
        """
        Validate, assemble, submit and decode.

        Returns:
            The decoded TransactionResult.

        Raises:
            ValidationError: Before anything is sent (missing field, no
                articles, amount misuse in strict mode).
            TransportError: Propagated unchanged from the transport.
            TransactionStateError: When the request was already submitted.
        """
        if self._state is not TransactionState.CONFIGURED:
            raise TransactionStateError(f"Transaction request already {self._state.value}")

        try:
            self.validate()
        except ValidationError as e:
            logger.info("Validation failed for %s: %s", self._service.name, e)
            await self._audit("validation_failed", details=self._validation_details(e))
            raise
        self._state = TransactionState.VALIDATED

        parameters = self.build_parameters()

        self._state = TransactionState.SUBMITTED
        await self._audit("transaction_submitted", details={
            "endpoint": self._endpoint,
            "parameter_count": len(parameters),
            "transport": self._transport.name,
        })
        try:
            response = await self._transport.submit(self._endpoint, parameters, self._authentication)
        except Exception as e:
            self._state = TransactionState.FAILED
            logger.error("Transport %s failed for %s: %s", self._transport.name, self._service.name, e)
            await self._audit("transaction_failed", details={
                "error": str(e),
                "status_code": e.status_code if isinstance(e, TransportError) else None,
            })
            raise

        result = TransactionResult.from_response(response)
        self._state = TransactionState.DECODED

        logger.info(
            "Transaction %s for %s decoded: status=%s actions=%d",
            result.key or "-",
            self._service.name,
            result.status_code,
            len(result.actions),
        )
        await self._audit("transaction_decoded", transaction_key=result.key, details={
            "status_code": result.status_code,
            "actions": sorted(result.actions),
        })
        return result

    def validate(self) -> None:
        """Run service validation, then the transaction's own checks."""
        self._service.validate_parameters(self._transaction_records())
        self._check_amounts()

    def build_parameters(self) -> list[ParameterRecord]:
        """Flatten transaction fields and the service into parameter records."""
        return self._service.complement_parameter_list(self._transaction_records())

    def _transaction_records(self) -> list[ParameterRecord]:
        records = [ParameterRecord.build("ServiceName", self._service.name)]
        if self._service.action:
            records.append(ParameterRecord.build("ServiceAction", self._service.action))
        for attribute, name in TRANSACTION_FIELDS:
            value = getattr(self, attribute)
            if value is not None and value != "":
                records.append(ParameterRecord.build(name, value))
        return records

    def _check_amounts(self) -> None:
        debit_set = self.amount_debit is not None
        credit_set = self.amount_credit is not None
        if debit_set == credit_set:
            message = (
                "Both AmountDebit and AmountCredit are set"
                if debit_set
                else "Neither AmountDebit nor AmountCredit is set"
            )
            if settings.strict_amounts:
                raise AmountError(message)
            logger.warning("%s for %s transaction", message, self._service.name)

    def _validation_details(self, error: ValidationError) -> dict[str, Any]:
        details: dict[str, Any] = {"error": type(error).__name__, "message": str(error)}
        if isinstance(error, MissingParameterError):
            details["missing"] = error.missing
        return details

    async def _audit(self, action: str, transaction_key: Optional[str] = None, details: Optional[dict] = None) -> None:
        if self._audit_session is None:
            return
        await log_event(
            self._audit_session,
            action,
            service=self._service.name,
            invoice=self.invoice,
            transaction_key=transaction_key,
            details=details,
        )

    def set_audit_session(self, session: Optional[AsyncSession]) -> "TransactionRequest":
        self._audit_session = session
        return self

    def set_currency(self, currency: str) -> "TransactionRequest":
        self.currency = currency
        return self

    def set_amount_debit(self, amount: float) -> "TransactionRequest":
        """The transaction debit amount (either this or the credit amount is expected)."""
        self.amount_debit = Decimal(str(amount))
        return self

    def set_amount_credit(self, amount: float) -> "TransactionRequest":
        """The transaction credit amount (either this or the debit amount is expected)."""
        self.amount_credit = Decimal(str(amount))
        return self

    def set_invoice(self, invoice: str) -> "TransactionRequest":
        self.invoice = invoice
        return self

    def set_order(self, order: str) -> "TransactionRequest":
        self.order = order
        return self

    def set_description(self, description: str) -> "TransactionRequest":
        self.description = description
        return self

    def set_client_ip(self, client_ip: str) -> "TransactionRequest":
        self.client_ip = client_ip
        return self

    def set_return_url(self, url: str) -> "TransactionRequest":
        """Where the customer returns after being sent to an external website."""
        self.return_url = url
        return self

    def set_return_url_cancel(self, url: str) -> "TransactionRequest":
        self.return_url_cancel = url
        return self

    def set_return_url_error(self, url: str) -> "TransactionRequest":
        self.return_url_error = url
        return self

    def set_return_url_reject(self, url: str) -> "TransactionRequest":
        self.return_url_reject = url
        return self

    def set_original_transaction_key(self, key: str) -> "TransactionRequest":
        """Key of the transaction this one follows up on (refund, recurring charge)."""
        self.original_transaction_key = key
        return self

    def set_start_recurrent(self, start_recurrent: bool) -> "TransactionRequest":
        self.start_recurrent = start_recurrent
        return self

    def set_push_url(self, url: str) -> "TransactionRequest":
        self.push_url = url
        return self

    def set_push_url_failure(self, url: str) -> "TransactionRequest":
        self.push_url_failure = url
        return self
