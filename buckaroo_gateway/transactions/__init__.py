from buckaroo_gateway.transactions.specification import TransactionSpecificationRequest
from buckaroo_gateway.transactions.transaction import TransactionRequest

__all__ = ["TransactionRequest", "TransactionSpecificationRequest"]
