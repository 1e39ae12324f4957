"""UBL (CIUS-PT) to DDL field mapping entry point.

`map_document` picks the rule set from the resolved document kind; the
rule sets themselves live in `invoice` and `credit_note`, and the pieces
they share in `parties`, `details` and `common`.
"""

from typing import cast

from ciuspt2ddl.config import MappingConfig
from ciuspt2ddl.ddl.models import ItemTransaction
from ciuspt2ddl.mapping.credit_note import map_credit_note
from ciuspt2ddl.mapping.invoice import map_invoice
from ciuspt2ddl.ubl.credit_note import CreditNote
from ciuspt2ddl.ubl.invoice import Invoice
from ciuspt2ddl.ubl.ubl_document import UBLDocument
from ciuspt2ddl.ubl.ubl_types import DocumentKind


def map_document(document: UBLDocument, kind: DocumentKind, config: MappingConfig | None = None) -> ItemTransaction:
    """Run the rule set for `kind` over `document`."""
    mapping_config = config or MappingConfig()

    if kind is DocumentKind.INVOICE:
        return map_invoice(cast(Invoice, document), mapping_config)
    if kind is DocumentKind.CREDIT_NOTE:
        return map_credit_note(cast(CreditNote, document), mapping_config)

    raise ValueError(f"No mapping rules for document kind {kind!r}")
