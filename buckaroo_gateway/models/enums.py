"""Enumerations for the gateway domain model."""

from enum import Enum


class TransactionState(str, Enum):
    """Lifecycle states for a transaction request."""

    CONFIGURED = "configured"
    VALIDATED = "validated"
    SUBMITTED = "submitted"
    DECODED = "decoded"
    FAILED = "failed"


class StatusCode(int, Enum):
    """Gateway status codes checked by the client."""

    SUCCESS = 190


class CustomerCategory(str, Enum):
    PERSON = "Person"
    COMPANY = "Company"


class CustomerSalutation(str, Enum):
    MR = "Mr"
    MRS = "Mrs"
    MISS = "Miss"


class CustomerCountry(str, Enum):
    """Countries accepted for Afterpay customers."""

    NL = "NL"
    BE = "BE"
    DE = "DE"
    AT = "AT"
    FI = "FI"


class CustomerLanguage(str, Enum):
    NL = "nl"
    FR = "fr"
    DE = "de"
    FI = "fi"
