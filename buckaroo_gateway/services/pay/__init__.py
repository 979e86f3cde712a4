from buckaroo_gateway.services.pay.afterpay import Afterpay
from buckaroo_gateway.services.pay.ideal import IDeal

__all__ = ["Afterpay", "IDeal"]
