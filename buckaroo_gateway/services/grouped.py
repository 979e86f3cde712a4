"""
Services with repeating groups and customer blocks.

A grouped service keeps its fields in two shapes that flatten differently:

  - Articles: one group per line item, flattened as GroupType "Article" and
    GroupID equal to the article's zero-based position.
  - Service parameters: keyed by group type + name, so BillingCustomerCity
    and ShippingCustomerCity never overwrite each other. Flattened with
    their own GroupType and an empty GroupID.

The generic raw-field mapping of Service is not sent for grouped services.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

from buckaroo_gateway.exceptions import MissingParameterError, NoArticlesProvidedError, UnknownParameterError
from buckaroo_gateway.models.parameters import ParameterRecord
from buckaroo_gateway.services.base import PayService, is_empty
from buckaroo_gateway.services.schema import CustomerBlock

ARTICLE_GROUP = "Article"


@dataclass(frozen=True)
class Article:
    """A single order line."""

    identifier: str
    description: str
    quantity: int
    gross_unit_price: float
    vat_percentage: float

    def wire_fields(self) -> list[tuple[str, Any]]:
        return [
            ("Identifier", self.identifier),
            ("Description", self.description),
            ("Quantity", self.quantity),
            ("GrossUnitPrice", self.gross_unit_price),
            ("VatPercentage", self.vat_percentage),
        ]


@dataclass(frozen=True)
class ServiceParameter:
    name: str
    value: Any
    group_type: str = ""


class GroupedService(PayService):
    """Base class for services that send articles and customer blocks."""

    requires_articles: bool = True

    def __init__(self):
        super().__init__()
        self._articles: list[Article] = []
        self._service_parameters: dict[str, ServiceParameter] = {}
        self._addresses_differ = False

    @property
    def articles(self) -> list[Article]:
        return list(self._articles)

    @property
    def service_parameters(self) -> dict[str, ServiceParameter]:
        return dict(self._service_parameters)

    @property
    def addresses_differ(self) -> bool:
        return self._addresses_differ

    def add_article(
        self,
        identifier: str,
        description: str,
        quantity: int,
        gross_unit_price: float,
        vat_percentage: float,
    ) -> "GroupedService":
        self._articles.append(Article(identifier, description, quantity, gross_unit_price, vat_percentage))
        return self

    def shipment_address_differs(self, value: bool = True) -> "GroupedService":
        self._addresses_differ = value
        return self

    def set_service_parameter(self, name: str, value: Any, group_type: str = "") -> "GroupedService":
        self._service_parameters[f"{group_type}{name}"] = ServiceParameter(name, value, group_type)
        return self

    def set_customer(self, block: CustomerBlock, **values: Any) -> "GroupedService":
        """Store keyword arguments as parameters of the given customer block."""
        for attribute, value in values.items():
            definition = block.field(attribute)
            if definition is None:
                raise UnknownParameterError(attribute, self.name)
            self.set_service_parameter(definition.name, definition.format(value), block.group_type)
        return self

    def mandatory_service_parameters(self) -> list[str]:
        """Keys of the service parameters that must be set. Override per service."""
        return []

    def missing_service_parameters(self) -> list[str]:
        missing = []
        for key in dict.fromkeys(self.mandatory_service_parameters()):
            parameter: Optional[ServiceParameter] = self._service_parameters.get(key)
            if parameter is None or is_empty(parameter.value):
                missing.append(key)
        return missing

    def validate_parameters(
        self,
        parameters: Sequence[ParameterRecord] = (),
        mandatory: Iterable[str] = (),
    ) -> None:
        """
        Validate articles, then service parameters, then the raw fields.

        Raises:
            NoArticlesProvidedError: When the service needs articles and has none.
            MissingParameterError: For the first missing mandatory field.
        """
        if self.requires_articles and not self._articles:
            raise NoArticlesProvidedError()

        missing = self.missing_service_parameters()
        if missing:
            raise MissingParameterError(missing[0], missing + self.missing_parameters(mandatory))

        super().validate_parameters(parameters, mandatory)

    def complement_parameter_list(self, parameters: Sequence[ParameterRecord]) -> list[ParameterRecord]:
        records = list(parameters)

        for index, article in enumerate(self._articles):
            for name, value in article.wire_fields():
                records.append(ParameterRecord.build(name, value, group_type=ARTICLE_GROUP, group_id=index))

        for parameter in self._service_parameters.values():
            records.append(ParameterRecord.build(parameter.name, parameter.value, group_type=parameter.group_type))

        return records
