"""DDL `ItemTransaction` record and its parts.

Field aliases are the JSON keys expected by the DDL consumer. Records are
frozen once built; serialize them with `ciuspt2ddl.converter.to_json`, which
drops every field left as `None`.
"""

import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DDLModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Party(DDLModel):
    federal_tax_id: Optional[str] = Field(default=None, alias="FederalTaxID")
    organization_name: Optional[str] = Field(default=None, alias="OrganizationName")
    address_line1: Optional[str] = Field(default=None, alias="AddressLine1")
    address_line2: Optional[str] = Field(default=None, alias="AddressLine2")
    postal_code: Optional[str] = Field(default=None, alias="PostalCode")
    # TODO: check that CountryID is always an ISO 3166-1 alpha-2 code for DDL
    country_id: Optional[str] = Field(default=None, alias="CountryID")
    gln: Optional[str] = Field(default=None, alias="GLN")


class UnloadPlaceAddress(DDLModel):
    address_line1: Optional[str] = Field(default=None, alias="AddressLine1")
    address_line2: Optional[str] = Field(default=None, alias="AddressLine2")
    # "<postal zone> <country subentity>"
    postal_code: Optional[str] = Field(default=None, alias="PostalCode")
    country_id: Optional[str] = Field(default=None, alias="CountryID")


class Detail(DDLModel):
    quantity: Optional[int] = Field(default=None, alias="Quantity")
    unit_price: float = Field(alias="UnitPrice")
    item_id: Optional[str] = Field(default=None, alias="ItemID")
    description: Optional[str] = Field(default=None, alias="Description")
    discount_percent: Optional[float] = Field(default=None, alias="DiscountPercent")


class ItemTransaction(DDLModel):
    """Flattened DDL transaction built from a CIUS-PT invoice or credit note.

    `party` duplicates `customer_party`; it predates the split into customer
    and supplier parties and is kept for existing DDL consumers.
    """

    create_date: Optional[datetime.date] = Field(default=None, alias="CreateDate")
    deferred_payment_date: Optional[datetime.date] = Field(default=None, alias="DeferredPaymentDate")
    contract_reference_number: Optional[str] = Field(default=None, alias="ContractReferenceNumber")
    total_amount: Optional[float] = Field(default=None, alias="TotalAmount")
    total_transaction_amount: Optional[float] = Field(default=None, alias="TotalTransactionAmount")
    total_global_discount_amount: Optional[float] = Field(default=None, alias="TotalGlobalDiscountAmount")
    party: Optional[Party] = Field(default=None, alias="Party")
    customer_party: Optional[Party] = Field(default=None, alias="CustomerParty")
    supplier_party: Optional[Party] = Field(default=None, alias="SupplierParty")
    unload_place_address: Optional[UnloadPlaceAddress] = Field(default=None, alias="UnloadPlaceAddress")
    details: List[Detail] = Field(default_factory=list, alias="Details")
