"""Tests for grouped-service validation and flattening (Afterpay)."""

import pytest

from buckaroo_gateway.exceptions import (
    InvalidParameterError,
    MissingParameterError,
    NoArticlesProvidedError,
    UnknownParameterError,
)
from buckaroo_gateway.models.parameters import ParameterRecord
from buckaroo_gateway.services.pay.afterpay import BILLING_CUSTOMER, SHIPPING_CUSTOMER, Afterpay


def _articles(records):
    return [r for r in records if r.group_type == "Article"]


class TestArticles:
    def test_no_articles_fails_even_when_complete(self, billing_fields):
        service = Afterpay().set_billing_customer(**billing_fields)
        with pytest.raises(NoArticlesProvidedError):
            service.validate_parameters([])

    def test_no_articles_checked_before_fields(self):
        with pytest.raises(NoArticlesProvidedError):
            Afterpay().validate_parameters([])

    def test_five_records_per_article(self, afterpay):
        afterpay.add_article("ABC-002", "Second", 1, 9.95, 9.0)
        afterpay.add_article("ABC-003", "Third", 3, 1.0, 21.0)
        records = _articles(afterpay.complement_parameter_list([]))

        assert len(records) == 15
        for index in range(3):
            group = [r for r in records if r.group_id == index]
            assert [r.name for r in group] == [
                "Identifier", "Description", "Quantity", "GrossUnitPrice", "VatPercentage",
            ]

    def test_article_values(self, afterpay):
        records = _articles(afterpay.complement_parameter_list([]))
        assert [r.to_wire() for r in records] == [
            {"Name": "Identifier", "GroupType": "Article", "GroupID": "0", "Value": "ABC-001"},
            {"Name": "Description", "GroupType": "Article", "GroupID": "0", "Value": "Test product"},
            {"Name": "Quantity", "GroupType": "Article", "GroupID": "0", "Value": "2"},
            {"Name": "GrossUnitPrice", "GroupType": "Article", "GroupID": "0", "Value": "20.00"},
            {"Name": "VatPercentage", "GroupType": "Article", "GroupID": "0", "Value": "21.00"},
        ]


class TestMandatoryFields:
    def test_complete_billing_validates(self, afterpay):
        afterpay.validate_parameters([])

    def test_shipping_optional_when_addresses_match(self, afterpay):
        afterpay.shipment_address_differs(False)
        afterpay.validate_parameters([])
        assert not [r for r in afterpay.complement_parameter_list([]) if r.group_type == "ShippingCustomer"]

    @pytest.mark.parametrize("key", SHIPPING_CUSTOMER.mandatory)
    def test_each_shipping_field_required_when_addresses_differ(self, afterpay, shipping_fields, key):
        shipping = shipping_fields
        attribute = next(f.attribute for f in SHIPPING_CUSTOMER.fields if f"ShippingCustomer{f.name}" == key)
        del shipping[attribute]
        afterpay.shipment_address_differs(True).set_shipping_customer(**shipping)

        with pytest.raises(MissingParameterError) as exc:
            afterpay.validate_parameters([])
        assert exc.value.field_name == key

    def test_addresses_differ_with_complete_shipping(self, afterpay, shipping_fields):
        afterpay.shipment_address_differs(True).set_shipping_customer(**shipping_fields)
        afterpay.validate_parameters([])

    def test_billing_and_shipping_lists_both_enforced(self):
        service = Afterpay().add_article("A", "B", 1, 1.0, 21.0).shipment_address_differs(True)
        assert service.mandatory_service_parameters() == BILLING_CUSTOMER.mandatory + SHIPPING_CUSTOMER.mandatory
        with pytest.raises(MissingParameterError) as exc:
            service.validate_parameters([])
        assert exc.value.field_name == "BillingCustomerCategory"
        assert "ShippingCustomerConversationLanguage" in exc.value.missing

    def test_billing_declaration_order(self):
        service = Afterpay().add_article("A", "B", 1, 1.0, 21.0).set_billing_customer(category="Person")
        with pytest.raises(MissingParameterError) as exc:
            service.validate_parameters([])
        assert exc.value.field_name == "BillingCustomerFirstName"
        assert exc.value.missing[:4] == [
            "BillingCustomerFirstName",
            "BillingCustomerLastName",
            "BillingCustomerSalutation",
            "BillingCustomerBirthDate",
        ]

    def test_zero_street_number_is_missing(self, afterpay):
        afterpay.set_billing_customer(street_number=0)
        with pytest.raises(MissingParameterError) as exc:
            afterpay.validate_parameters([])
        assert exc.value.field_name == "BillingCustomerStreetNumber"

    def test_empty_value_is_missing(self, afterpay):
        afterpay.set_billing_customer(city="")
        with pytest.raises(MissingParameterError) as exc:
            afterpay.validate_parameters([])
        assert exc.value.field_name == "BillingCustomerCity"

    def test_unknown_keyword_rejected(self):
        with pytest.raises(UnknownParameterError):
            Afterpay().set_billing_customer(frist_name="Jordi")

    def test_enumerated_values_checked(self):
        with pytest.raises(InvalidParameterError) as exc:
            Afterpay().set_billing_customer(country="US")
        assert exc.value.name == "Country"

    def test_enumerated_values_accept_plain_strings(self, afterpay):
        afterpay.set_billing_customer(category="Company", salutation="Mrs", conversation_language="de")
        values = {r.name: r.value for r in afterpay.complement_parameter_list([]) if r.group_type == "BillingCustomer"}
        assert values["Category"] == "Company"
        assert values["Salutation"] == "Mrs"
        assert values["ConversationLanguage"] == "de"
        assert values["Country"] == "NL"


class TestServiceParameters:
    def test_billing_and_shipping_city_not_merged(self, afterpay):
        afterpay.set_shipping_customer(city="Den Haag")
        cities = [r for r in afterpay.complement_parameter_list([]) if r.name == "City"]

        assert {(r.group_type, r.value) for r in cities} == {
            ("BillingCustomer", "Amsterdam"),
            ("ShippingCustomer", "Den Haag"),
        }
        assert all(r.group_id == "" for r in cities)

    def test_same_group_and_name_overwrites(self, afterpay):
        afterpay.set_billing_customer(city="Utrecht")
        cities = [r for r in afterpay.complement_parameter_list([]) if r.name == "City"]
        assert [r.value for r in cities] == ["Utrecht"]

    def test_birth_date_formatted(self, afterpay):
        record = next(r for r in afterpay.complement_parameter_list([]) if r.name == "BirthDate")
        assert record.value == "15-06-1970"

    def test_merchant_image_is_ungrouped(self, afterpay):
        record = next(r for r in afterpay.complement_parameter_list([]) if r.name == "MerchantImageUrl")
        assert record.group_type == ""
        assert record.group_id == ""


class TestComplement:
    def test_pure(self, afterpay):
        head = [ParameterRecord.build("Currency", "EUR")]
        first = afterpay.complement_parameter_list(head)
        second = afterpay.complement_parameter_list(head)

        assert first == second
        assert head == [ParameterRecord.build("Currency", "EUR")]

    def test_input_first_then_articles_then_service_parameters(self, afterpay):
        head = [ParameterRecord.build("Currency", "EUR")]
        records = afterpay.complement_parameter_list(head)

        assert records[0] == head[0]
        assert [r.group_type for r in records[1:6]] == ["Article"] * 5
        assert all(r.group_type != "Article" for r in records[6:])

    def test_name(self):
        assert Afterpay().name == "Afterpay"
