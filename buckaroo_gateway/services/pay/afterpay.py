"""
Afterpay (Riverty) pay-after-delivery payments.

Afterpay needs at least one article and a complete billing customer. When
the shipment address differs from the billing address the shipping customer
becomes mandatory too; otherwise shipping fields are optional and only sent
when set.
"""

from datetime import date
from typing import Any, Union

from buckaroo_gateway.models.enums import CustomerCategory, CustomerCountry, CustomerLanguage, CustomerSalutation
from buckaroo_gateway.services.grouped import GroupedService
from buckaroo_gateway.services.schema import CustomerBlock, FieldDefinition


def _format_birth_date(value: Union[date, str]) -> str:
    if isinstance(value, date):
        return value.strftime("%d-%m-%Y")
    return value


def _customer_block(group_type: str, mandatory: tuple[str, ...]) -> CustomerBlock:
    return CustomerBlock(
        group_type=group_type,
        fields=(
            FieldDefinition("category", "Category", choices=CustomerCategory),
            FieldDefinition("company_name", "CompanyName"),
            FieldDefinition("salutation", "Salutation", choices=CustomerSalutation),
            FieldDefinition("first_name", "FirstName"),
            FieldDefinition("last_name", "LastName"),
            FieldDefinition("birth_date", "BirthDate", formatter=_format_birth_date),
            FieldDefinition("street", "Street"),
            FieldDefinition("street_number", "StreetNumber"),
            FieldDefinition("street_number_additional", "StreetNumberAdditional"),
            FieldDefinition("postal_code", "PostalCode"),
            FieldDefinition("city", "City"),
            FieldDefinition("country", "Country", choices=CustomerCountry),
            FieldDefinition("mobile_phone", "MobilePhone"),
            FieldDefinition("email", "Email"),
            FieldDefinition("conversation_language", "ConversationLanguage", choices=CustomerLanguage),
            FieldDefinition("customer_number", "CustomerNumber"),
        ),
        mandatory_names=mandatory,
    )


BILLING_CUSTOMER = _customer_block(
    "BillingCustomer",
    (
        "Category",
        "FirstName",
        "LastName",
        "Salutation",
        "BirthDate",
        "Street",
        "StreetNumber",
        "PostalCode",
        "City",
        "Country",
        "MobilePhone",
        "Email",
        "ConversationLanguage",
    ),
)

SHIPPING_CUSTOMER = _customer_block(
    "ShippingCustomer",
    (
        "Category",
        "FirstName",
        "LastName",
        "Street",
        "StreetNumber",
        "PostalCode",
        "City",
        "ConversationLanguage",
    ),
)


class Afterpay(GroupedService):

    @property
    def name(self) -> str:
        return "Afterpay"

    def mandatory_service_parameters(self) -> list[str]:
        mandatory = BILLING_CUSTOMER.mandatory
        if self.addresses_differ:
            mandatory += SHIPPING_CUSTOMER.mandatory
        return mandatory

    def set_billing_customer(self, **values: Any) -> "Afterpay":
        """
        Set billing customer fields by keyword, e.g. ``first_name="Jordi"``.

        Accepted keywords: category, company_name, salutation, first_name,
        last_name, birth_date (date or DD-MM-YYYY), street, street_number,
        street_number_additional, postal_code, city, country, mobile_phone,
        email, conversation_language, customer_number.
        """
        self.set_customer(BILLING_CUSTOMER, **values)
        return self

    def set_shipping_customer(self, **values: Any) -> "Afterpay":
        """Set shipping customer fields; same keywords as set_billing_customer."""
        self.set_customer(SHIPPING_CUSTOMER, **values)
        return self

    def set_merchant_image_url(self, url: str) -> "Afterpay":
        """Image shown at the top of the customer's order page in My Riverty."""
        self.set_service_parameter("MerchantImageUrl", url)
        return self
