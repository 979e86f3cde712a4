from buckaroo_gateway.services.base import PayService, Service
from buckaroo_gateway.services.grouped import Article, GroupedService, ServiceParameter
from buckaroo_gateway.services.pay import Afterpay, IDeal

__all__ = [
    "Service",
    "PayService",
    "GroupedService",
    "Article",
    "ServiceParameter",
    "Afterpay",
    "IDeal",
]
