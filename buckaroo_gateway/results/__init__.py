from buckaroo_gateway.results.decoder import decode_actions, dig
from buckaroo_gateway.results.models import Action, ActionParameter
from buckaroo_gateway.results.transaction import TransactionResult, TransactionSpecificationResult

__all__ = [
    "Action",
    "ActionParameter",
    "TransactionResult",
    "TransactionSpecificationResult",
    "decode_actions",
    "dig",
]
