import logging

from ciuspt2ddl.config import MappingConfig
from ciuspt2ddl.ddl.models import ItemTransaction
from ciuspt2ddl.mapping.common import contract_reference, first_delivery_location, issue_date, monetary_total
from ciuspt2ddl.mapping.details import map_credit_note_details
from ciuspt2ddl.mapping.parties import map_party, map_unload_place_address
from ciuspt2ddl.ubl.credit_note import CreditNote

logger = logging.getLogger(__name__)


def map_credit_note(credit_note: CreditNote, config: MappingConfig) -> ItemTransaction:
    """Map a CIUS-PT credit note to a DDL `ItemTransaction`.

    Same rules as `map_invoice`, except that `DeferredPaymentDate` is never
    set and the details come from the credit note lines.
    """
    totals = monetary_total(credit_note)
    location = first_delivery_location(credit_note)
    customer = credit_note.accounting_customer_party.party if credit_note.accounting_customer_party else None
    supplier = credit_note.accounting_supplier_party.party if credit_note.accounting_supplier_party else None
    customer_party = map_party(customer, location)

    transaction = ItemTransaction(
        create_date=issue_date(credit_note),
        contract_reference_number=contract_reference(credit_note, config),
        total_amount=totals.tax_exclusive_amount,
        total_transaction_amount=totals.tax_inclusive_amount,
        total_global_discount_amount=totals.allowance_total_amount,
        party=customer_party,
        customer_party=customer_party,
        supplier_party=map_party(supplier, location),
        unload_place_address=map_unload_place_address(location.address if location else None),
        details=map_credit_note_details(credit_note.credit_note_line),
    )

    logger.debug(f"Mapped credit note {credit_note.id} with {len(transaction.details)} detail lines")
    return transaction
