import datetime
from typing import List, Optional

from pydantic_xml import element

from ciuspt2ddl.ubl.cac import InvoiceLine
from ciuspt2ddl.ubl.ubl_document import UBLDocument
from ciuspt2ddl.ubl.ubl_types import NSMAP


class Invoice(UBLDocument, tag="Invoice", search_mode="unordered", ns="", nsmap=NSMAP):
    """
    Pydantic Model for CIUS-PT (UBL 2.1) invoices - only the subset needed to build a DDL ItemTransaction.

    see: https://www.truugo.com/ubl/2.1/invoice/
        https://docs.oasis-open.org/ubl/os-UBL-2.1/xsd/maindoc/UBL-Invoice-2.1.xsd
    """

    due_date: Optional[datetime.date] = element(tag="DueDate", default=None, ns="cbc")
    invoice_type_code: Optional[str] = element(tag="InvoiceTypeCode", default=None, ns="cbc")
    invoice_line: List[InvoiceLine] = []
