"""Line item mapping: UBL invoice / credit note lines to DDL `Detail` records."""

from collections.abc import Iterable
from typing import Optional

from ciuspt2ddl.ddl.models import Detail
from ciuspt2ddl.errors import MissingRequiredStructureError
from ciuspt2ddl.ubl.cac import AllowanceCharge, CreditNoteLine, InvoiceLine, Item, Price


def _quantity(value: Optional[float]) -> Optional[int]:
    # truncate, do not round: 2.9 -> 2
    return int(value) if value is not None else None


def _unit_price(price: Optional[Price], line_path: str) -> float:
    if price is None or price.price_amount is None:
        raise MissingRequiredStructureError(f"{line_path}/Price/PriceAmount")
    return float(price.price_amount)


def _first_description(item: Optional[Item]) -> Optional[str]:
    return item.description[0] if item and item.description else None


def _discount_percent(allowance_charges: list[AllowanceCharge]) -> Optional[float]:
    if not allowance_charges:
        return None
    return allowance_charges[0].multiplier_factor_numeric


def map_invoice_details(lines: Iterable[InvoiceLine]) -> list[Detail]:
    """Map invoice lines, in order, one `Detail` each.

    The description falls back to the item name when the item has no description.
    """
    details: list[Detail] = []
    for line in lines:
        description = _first_description(line.item)
        if description is None and line.item is not None:
            description = line.item.name

        details.append(
            Detail(
                quantity=_quantity(line.invoiced_quantity),
                unit_price=_unit_price(line.price, f"InvoiceLine[{line.id}]"),
                item_id=line.item.seller_item_id if line.item else None,
                description=description,
                discount_percent=_discount_percent(line.allowance_charge),
            )
        )

    return details


def map_credit_note_details(lines: Iterable[CreditNoteLine]) -> list[Detail]:
    """Map credit note lines, in order, one `Detail` each.

    Unlike invoice lines there is no fallback to the item name.
    """
    return [
        Detail(
            quantity=_quantity(line.credited_quantity),
            unit_price=_unit_price(line.price, f"CreditNoteLine[{line.id}]"),
            item_id=line.item.seller_item_id if line.item else None,
            description=_first_description(line.item),
            discount_percent=_discount_percent(line.allowance_charge),
        )
        for line in lines
    ]
