import datetime
from typing import List, Optional

from pydantic_xml import BaseXmlModel, element, wrapped

from ciuspt2ddl.ubl.ubl_types import NSMAP, NSMAP_CREDIT_NOTE


class Country(BaseXmlModel, tag="Country", ns="cac", nsmap=NSMAP):
    identification_code: Optional[str] = element(tag="IdentificationCode", default=None, ns="cbc", nsmap=NSMAP)


class Address(BaseXmlModel, tag="Address", search_mode="unordered", ns="cac", nsmap=NSMAP):
    street_name: Optional[str] = element(tag="StreetName", default=None, ns="cbc", nsmap=NSMAP)
    additional_street_name: Optional[str] = element(tag="AdditionalStreetName", default=None, ns="cbc", nsmap=NSMAP)
    city_name: Optional[str] = element(tag="CityName", default=None, ns="cbc", nsmap=NSMAP)
    postal_zone: Optional[str] = element(tag="PostalZone", default=None, ns="cbc", nsmap=NSMAP)
    country_subentity: Optional[str] = element(tag="CountrySubentity", default=None, ns="cbc", nsmap=NSMAP)
    country: Optional[Country] = None


class PostalAddress(Address, tag="PostalAddress", ns="cac", nsmap=NSMAP):
    pass


class PartyIdentification(BaseXmlModel, tag="PartyIdentification", ns="cac", nsmap=NSMAP):
    id: Optional[str] = element(tag="ID", default=None, ns="cbc", nsmap=NSMAP)


class PartyName(BaseXmlModel, tag="PartyName", ns="cac", nsmap=NSMAP):
    name: Optional[str] = element(tag="Name", default=None, ns="cbc", nsmap=NSMAP)


class Party(BaseXmlModel, tag="Party", search_mode="unordered", ns="cac", nsmap=NSMAP):
    party_identification: List[PartyIdentification] = []
    party_name: List[PartyName] = []
    postal_address: Optional[PostalAddress] = None


class SupplierPartyType(BaseXmlModel, search_mode="unordered"):
    party: Optional[Party] = None


class AccountingSupplierParty(SupplierPartyType, tag="AccountingSupplierParty", ns="cac", nsmap=NSMAP):
    pass


class AccountingCustomerParty(SupplierPartyType, tag="AccountingCustomerParty", ns="cac", nsmap=NSMAP):
    pass


class DeliveryLocation(BaseXmlModel, tag="DeliveryLocation", search_mode="unordered", ns="cac", nsmap=NSMAP):
    # usually a GLN (schemeID="0088")
    id: Optional[str] = element(tag="ID", default=None, ns="cbc", nsmap=NSMAP)
    address: Optional[Address] = None


class Delivery(BaseXmlModel, tag="Delivery", search_mode="unordered", ns="cac", nsmap=NSMAP):
    actual_delivery_date: Optional[datetime.date] = element(
        tag="ActualDeliveryDate", default=None, ns="cbc", nsmap=NSMAP
    )
    delivery_location: Optional[DeliveryLocation] = None


class OrderReference(BaseXmlModel, tag="OrderReference", search_mode="unordered", ns="cac", nsmap=NSMAP):
    id: Optional[str] = element(tag="ID", default=None, ns="cbc", nsmap=NSMAP)
    sales_order_id: Optional[str] = element(tag="SalesOrderID", default=None, ns="cbc", nsmap=NSMAP)


class Price(BaseXmlModel, tag="Price", search_mode="unordered", ns="cac", nsmap=NSMAP):
    price_amount: Optional[float] = element(tag="PriceAmount", default=None, ns="cbc", nsmap=NSMAP)
    base_quantity: Optional[float] = element(tag="BaseQuantity", default=None, ns="cbc", nsmap=NSMAP)


class AllowanceCharge(BaseXmlModel, tag="AllowanceCharge", search_mode="unordered", ns="cac", nsmap=NSMAP):
    # charge_indicator
    # FALSE = discount
    # TRUE = charge
    charge_indicator: bool = element(tag="ChargeIndicator", default=False, ns="cbc", nsmap=NSMAP)
    allowance_charge_reason_code: Optional[str] = element(
        tag="AllowanceChargeReasonCode", default=None, ns="cbc", nsmap=NSMAP
    )
    allowance_charge_reason: Optional[str] = element(tag="AllowanceChargeReason", default=None, ns="cbc", nsmap=NSMAP)
    # percentage, e.g. 10 for 10%
    multiplier_factor_numeric: Optional[float] = element(
        tag="MultiplierFactorNumeric", default=None, ns="cbc", nsmap=NSMAP
    )
    amount: Optional[float] = element(tag="Amount", default=None, ns="cbc", nsmap=NSMAP)
    base_amount: Optional[float] = element(tag="BaseAmount", default=None, ns="cbc", nsmap=NSMAP)


class Item(BaseXmlModel, tag="Item", search_mode="unordered", ns="cac", nsmap=NSMAP):
    description: Optional[List[str]] = element(tag="Description", default=None, ns="cbc", nsmap=NSMAP)
    name: Optional[str] = element(tag="Name", default=None, ns="cbc", nsmap=NSMAP)
    seller_item_id: Optional[str] = wrapped(
        "SellersItemIdentification",
        ns="cac",
        nsmap=NSMAP,
        default=None,
        entity=element(tag="ID", default=None, ns="cbc", nsmap=NSMAP),
    )


class InvoiceLine(BaseXmlModel, tag="InvoiceLine", search_mode="unordered", ns="cac", nsmap=NSMAP):
    id: Optional[str] = element(tag="ID", default=None, ns="cbc", nsmap=NSMAP)
    invoiced_quantity: Optional[float] = element(tag="InvoicedQuantity", default=None, ns="cbc", nsmap=NSMAP)
    line_extension_amount: Optional[float] = element(tag="LineExtensionAmount", default=None, ns="cbc", nsmap=NSMAP)
    allowance_charge: List[AllowanceCharge] = []
    item: Optional[Item] = None
    price: Optional[Price] = None


class CreditNoteLine(BaseXmlModel, tag="CreditNoteLine", search_mode="unordered", ns="cac", nsmap=NSMAP_CREDIT_NOTE):
    id: Optional[str] = element(tag="ID", default=None, ns="cbc", nsmap=NSMAP_CREDIT_NOTE)
    credited_quantity: Optional[float] = element(
        tag="CreditedQuantity", default=None, ns="cbc", nsmap=NSMAP_CREDIT_NOTE
    )
    line_extension_amount: Optional[float] = element(
        tag="LineExtensionAmount", default=None, ns="cbc", nsmap=NSMAP_CREDIT_NOTE
    )
    allowance_charge: List[AllowanceCharge] = []
    item: Optional[Item] = None
    price: Optional[Price] = None


class LegalMonetaryTotal(BaseXmlModel, tag="LegalMonetaryTotal", search_mode="unordered", ns="cac", nsmap=NSMAP):
    # no zero defaults: an absent amount must stay absent in the DDL record
    line_extension_amount: Optional[float] = element(tag="LineExtensionAmount", default=None, ns="cbc", nsmap=NSMAP)
    tax_exclusive_amount: Optional[float] = element(tag="TaxExclusiveAmount", default=None, ns="cbc", nsmap=NSMAP)
    tax_inclusive_amount: Optional[float] = element(tag="TaxInclusiveAmount", default=None, ns="cbc", nsmap=NSMAP)
    allowance_total_amount: Optional[float] = element(tag="AllowanceTotalAmount", default=None, ns="cbc", nsmap=NSMAP)
    charge_total_amount: Optional[float] = element(tag="ChargeTotalAmount", default=None, ns="cbc", nsmap=NSMAP)
    prepaid_amount: Optional[float] = element(tag="PrepaidAmount", default=None, ns="cbc", nsmap=NSMAP)
    payable_amount: Optional[float] = element(tag="PayableAmount", default=None, ns="cbc", nsmap=NSMAP)
