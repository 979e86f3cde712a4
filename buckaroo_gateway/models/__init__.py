from buckaroo_gateway.models.audit import AuditLog, Base
from buckaroo_gateway.models.enums import (
    CustomerCategory,
    CustomerCountry,
    CustomerLanguage,
    CustomerSalutation,
    StatusCode,
    TransactionState,
)
from buckaroo_gateway.models.parameters import ParameterRecord, format_value

__all__ = [
    "Base",
    "AuditLog",
    "ParameterRecord",
    "format_value",
    "TransactionState",
    "StatusCode",
    "CustomerCategory",
    "CustomerCountry",
    "CustomerLanguage",
    "CustomerSalutation",
]
