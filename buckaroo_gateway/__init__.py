"""Client for the Buckaroo payment gateway: request assembly, validation and response decoding."""

from buckaroo_gateway.authentication import Authentication
from buckaroo_gateway.client import BuckarooClient
from buckaroo_gateway.exceptions import (
    BuckarooError,
    MissingParameterError,
    NoArticlesProvidedError,
    TransportError,
)
from buckaroo_gateway.models.parameters import ParameterRecord
from buckaroo_gateway.results import Action, TransactionResult, TransactionSpecificationResult
from buckaroo_gateway.services import Afterpay, GroupedService, IDeal, Service
from buckaroo_gateway.transactions import TransactionRequest, TransactionSpecificationRequest

__all__ = [
    "Authentication",
    "BuckarooClient",
    "BuckarooError",
    "MissingParameterError",
    "NoArticlesProvidedError",
    "TransportError",
    "ParameterRecord",
    "Action",
    "TransactionResult",
    "TransactionSpecificationResult",
    "Service",
    "GroupedService",
    "IDeal",
    "Afterpay",
    "TransactionRequest",
    "TransactionSpecificationRequest",
]
