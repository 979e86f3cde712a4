"""iDEAL: Dutch bank-transfer payments, a single issuer field."""

from buckaroo_gateway.services.base import PayService


class IDeal(PayService):
    mandatory_parameters = ("issuer",)
    allowed_parameters = frozenset({"issuer"})

    @property
    def name(self) -> str:
        return "ideal"

    def set_issuer(self, issuer: str) -> "IDeal":
        """Set the BIC of the customer's bank (e.g. 'ABNANL2A')."""
        self.set("issuer", issuer)
        return self
