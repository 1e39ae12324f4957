import logging

from ciuspt2ddl.config import MappingConfig
from ciuspt2ddl.ddl.models import ItemTransaction
from ciuspt2ddl.mapping.common import contract_reference, first_delivery_location, issue_date, monetary_total
from ciuspt2ddl.mapping.details import map_invoice_details
from ciuspt2ddl.mapping.parties import map_party, map_unload_place_address
from ciuspt2ddl.ubl.invoice import Invoice

logger = logging.getLogger(__name__)


def map_invoice(invoice: Invoice, config: MappingConfig) -> ItemTransaction:
    """Map a CIUS-PT invoice to a DDL `ItemTransaction`.

    Header dates and totals come from the invoice itself, both parties share
    the first delivery location (GLN) and the unload place is that
    location's address. Fields without a rule here are left unset.

    Raises:
        MissingRequiredStructureError: If `IssueDate`, `LegalMonetaryTotal`
            or a line's `Price/PriceAmount` is missing.
    """
    totals = monetary_total(invoice)
    location = first_delivery_location(invoice)
    customer = invoice.accounting_customer_party.party if invoice.accounting_customer_party else None
    supplier = invoice.accounting_supplier_party.party if invoice.accounting_supplier_party else None
    customer_party = map_party(customer, location)

    transaction = ItemTransaction(
        create_date=issue_date(invoice),
        deferred_payment_date=invoice.due_date,
        contract_reference_number=contract_reference(invoice, config),
        total_amount=totals.tax_exclusive_amount,
        total_transaction_amount=totals.tax_inclusive_amount,
        total_global_discount_amount=totals.allowance_total_amount,
        party=customer_party,
        customer_party=customer_party,
        supplier_party=map_party(supplier, location),
        unload_place_address=map_unload_place_address(location.address if location else None),
        details=map_invoice_details(invoice.invoice_line),
    )

    logger.debug(f"Mapped invoice {invoice.id} with {len(transaction.details)} detail lines")
    return transaction
