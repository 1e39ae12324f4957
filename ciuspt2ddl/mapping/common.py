"""Header-level rules shared by the invoice and credit note mappings."""

import datetime
from typing import Optional

from ciuspt2ddl.config import ContractReferenceSource, MappingConfig
from ciuspt2ddl.errors import MissingRequiredStructureError
from ciuspt2ddl.ubl.cac import DeliveryLocation, LegalMonetaryTotal
from ciuspt2ddl.ubl.ubl_document import UBLDocument


def issue_date(document: UBLDocument) -> datetime.date:
    if document.issue_date is None:
        raise MissingRequiredStructureError("IssueDate", document.id)
    return document.issue_date


def monetary_total(document: UBLDocument) -> LegalMonetaryTotal:
    if document.legal_monetary_total is None:
        raise MissingRequiredStructureError("LegalMonetaryTotal", document.id)
    return document.legal_monetary_total


def contract_reference(document: UBLDocument, config: MappingConfig) -> Optional[str]:
    if config.contract_reference_source is ContractReferenceSource.BUYER_REFERENCE:
        return document.buyer_reference
    return document.order_reference.id if document.order_reference else None


def first_delivery_location(document: UBLDocument) -> Optional[DeliveryLocation]:
    """Delivery location of the first `cac:Delivery`; any further deliveries are ignored."""
    if not document.delivery:
        return None
    return document.delivery[0].delivery_location
