from typing import List, Optional

from pydantic_xml import element

from ciuspt2ddl.ubl.cac import CreditNoteLine
from ciuspt2ddl.ubl.ubl_document import UBLDocument
from ciuspt2ddl.ubl.ubl_types import NSMAP_CREDIT_NOTE


class CreditNote(UBLDocument, tag="CreditNote", search_mode="unordered", ns="", nsmap=NSMAP_CREDIT_NOTE):
    """
    Implementation of a subset of the UBL CreditNote message type. Unlike `Invoice` there is no DueDate.

    see: https://www.truugo.com/ubl/2.1/creditnote/
    """

    credit_note_type_code: Optional[str] = element(tag="CreditNoteTypeCode", default=None, ns="cbc")
    credit_note_line: List[CreditNoteLine] = []
