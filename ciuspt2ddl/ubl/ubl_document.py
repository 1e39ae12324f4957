"""UBL document base model and helpers.

Provides a Pydantic-XML base class for UBL documents (Invoices and
Credit Notes), the root-element based document type resolver and the
loaders that turn XML text or files into typed documents.
"""

# ruff: noqa: UP045, UP035, UP006
# disabled some rules becasue of pydantic-xml usage

import datetime
import logging
from pathlib import Path
from typing import List, Optional

from lxml import etree  # pyright: ignore
from pydantic_xml import BaseXmlModel, element

from ciuspt2ddl.errors import UnrecognizedDocumentTypeError
from ciuspt2ddl.ubl.cac import (
    AccountingCustomerParty,
    AccountingSupplierParty,
    Delivery,
    LegalMonetaryTotal,
    OrderReference,
)
from ciuspt2ddl.ubl.ubl_types import DocumentKind

logger = logging.getLogger(__name__)


class UBLDocument(BaseXmlModel):
    """Base class for UBL documents (Invoice, CreditNote).

    Only `issue_date` and `legal_monetary_total` are required to build a
    DDL record; they are still optional here so the mapper, not the loader,
    decides what a malformed document is.

    Attributes:
        id: Unique identifier of the document.
        issue_date: Date the document was issued.
        buyer_reference: Reference assigned by the buyer (BT-10).
        order_reference: Purchase order reference (BT-13).
        accounting_supplier_party: Supplier party information.
        accounting_customer_party: Customer party information.
        delivery: Delivery blocks, in document order.
        legal_monetary_total: Monetary totals.
    """

    customization_id: Optional[str] = element(tag="CustomizationID", default=None, ns="cbc")
    profile_id: Optional[str] = element(tag="ProfileID", default=None, ns="cbc")
    id: Optional[str] = element(tag="ID", default=None, ns="cbc")
    issue_date: Optional[datetime.date] = element(tag="IssueDate", default=None, ns="cbc")
    note: Optional[List[str]] = element(tag="Note", default=None, ns="cbc")
    document_currency_code: Optional[str] = element(tag="DocumentCurrencyCode", default=None, ns="cbc")
    buyer_reference: Optional[str] = element(tag="BuyerReference", default=None, ns="cbc")
    order_reference: Optional[OrderReference] = None
    accounting_supplier_party: Optional[AccountingSupplierParty] = None
    accounting_customer_party: Optional[AccountingCustomerParty] = None
    delivery: List[Delivery] = []
    legal_monetary_total: Optional[LegalMonetaryTotal] = None


def _read_root(xml: str | bytes) -> etree._Element:
    """Parse the payload and return its root element.

    `bytes` are decoded as their XML declaration says. A `str` is already
    decoded text: lxml refuses it when it carries an encoding declaration, so
    it is encoded to UTF-8 and the parser is told to ignore the declared
    encoding (an `ISO-8859-1` declaration would otherwise garble non-ASCII text).
    """
    if isinstance(xml, str):
        parser = etree.XMLParser(resolve_entities=False, no_network=True, encoding="utf-8")
        return etree.fromstring(xml.encode("utf-8"), parser)

    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    return etree.fromstring(xml, parser)


def read_xml_file(xml_file: str | Path) -> bytes:
    """Read an XML file as raw bytes, leaving decoding to the XML parser.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    if isinstance(xml_file, str):
        xml_file = Path(xml_file)

    if not xml_file.exists():
        raise FileNotFoundError(f"File {xml_file} does not exist")

    return xml_file.read_bytes()


def resolve_document_kind(xml: str | bytes) -> DocumentKind:
    """Identify the UBL document kind from the XML root element.

    Args:
        xml: The XML payload.

    Returns:
        DocumentKind: `INVOICE` for an `Invoice` root, `CREDIT_NOTE` for a `CreditNote` root.

    Raises:
        lxml.etree.XMLSyntaxError: If the payload is not well-formed XML.
        UnrecognizedDocumentTypeError: If the root element is neither `Invoice` nor `CreditNote`.
    """
    root = _read_root(xml)
    local_name = etree.QName(root).localname

    for kind in DocumentKind:
        if kind.value == local_name:
            logger.debug(f"Resolved document kind {kind.name} from root element '{local_name}'")
            return kind

    raise UnrecognizedDocumentTypeError(local_name)


def _document_model(kind: DocumentKind) -> type[UBLDocument]:
    if kind is DocumentKind.INVOICE:
        from ciuspt2ddl.ubl.invoice import Invoice

        return Invoice

    from ciuspt2ddl.ubl.credit_note import CreditNote

    return CreditNote


def load_ubl_document(xml: str | bytes, kind: DocumentKind) -> UBLDocument:
    """Load the XML payload into the typed model for `kind`.

    Raises:
        lxml.etree.XMLSyntaxError: If the payload is not well-formed XML.
        pydantic_xml.ParsingError: If the root element does not match the model for `kind`.
        pydantic.ValidationError: If an element value cannot be coerced to its declared type.
    """
    model = _document_model(kind)
    ubl_document = model.from_xml_tree(_read_root(xml))
    logger.debug(f"Loaded {model.__name__} {ubl_document.id}")
    return ubl_document


def parse_ubl_document_from_string(xml: str | bytes) -> UBLDocument:
    """Parse a UBL XML payload into a typed document model.

    Supports the following UBL document types based on the XML root:
    "Invoice" and "CreditNote".

    Args:
        xml: The XML payload.

    Returns:
        UBLDocument: A parsed `Invoice` or `CreditNote` instance.

    Raises:
        UnrecognizedDocumentTypeError: If the document type is not supported.
    """
    return load_ubl_document(xml, resolve_document_kind(xml))


def parse_ubl_document(xml_file: str | Path) -> UBLDocument:
    """Parse a UBL XML file into a typed document model.

    Args:
        xml_file: Path to the UBL XML file.

    Returns:
        UBLDocument: A parsed `Invoice` or `CreditNote` instance.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnrecognizedDocumentTypeError: If the document type is not supported.
    """
    logger.debug(f"Parsing UBL document: {xml_file}")
    ubl_document = parse_ubl_document_from_string(read_xml_file(xml_file))

    logger.debug(f"Successfully parsed UBL document: {xml_file}")
    return ubl_document
