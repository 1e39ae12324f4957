import pytest

from ciuspt2ddl.ddl.models import Detail
from ciuspt2ddl.errors import MissingRequiredStructureError
from ciuspt2ddl.mapping.details import map_credit_note_details, map_invoice_details
from ciuspt2ddl.ubl.cac import AllowanceCharge, CreditNoteLine, InvoiceLine, Item, Price


def _invoice_line(line_id: str, quantity: float | None = 1, **kwargs) -> InvoiceLine:
    kwargs.setdefault("price", Price(price_amount=10.0))
    return InvoiceLine(id=line_id, invoiced_quantity=quantity, **kwargs)


def test_map_invoice_details_preserves_order_and_count():
    lines = [
        _invoice_line(str(n), item=Item(name=f"Item {n}", seller_item_id=f"SKU{n}")) for n in range(1, 6)
    ]

    details = map_invoice_details(lines)

    assert len(details) == 5
    assert [d.item_id for d in details] == ["SKU1", "SKU2", "SKU3", "SKU4", "SKU5"]


def test_map_invoice_details_empty():
    assert map_invoice_details([]) == []


def test_map_invoice_detail_fields():
    line = _invoice_line(
        "1",
        quantity=2,
        item=Item(description=["Widget", "Blue"], name="Widget WX-1", seller_item_id="SKU1"),
        price=Price(price_amount=50.0, base_quantity=1.0),
    )

    assert map_invoice_details([line]) == [
        Detail(quantity=2, unit_price=50.0, item_id="SKU1", description="Widget"),
    ]


def test_map_invoice_detail_quantity_is_truncated():
    details = map_invoice_details([_invoice_line("1", quantity=2.9), _invoice_line("2", quantity=-1.5)])

    assert [d.quantity for d in details] == [2, -1]
    assert isinstance(details[0].quantity, int)


def test_map_invoice_detail_without_quantity():
    assert map_invoice_details([_invoice_line("1", quantity=None)])[0].quantity is None


def test_map_invoice_detail_description_falls_back_to_name():
    details = map_invoice_details([_invoice_line("1", item=Item(name="Cimento cola"))])

    assert details[0].description == "Cimento cola"


def test_map_invoice_detail_without_item():
    detail = map_invoice_details([_invoice_line("1")])[0]

    assert detail.item_id is None
    assert detail.description is None


def test_map_invoice_detail_discount_from_first_allowance_charge():
    line = _invoice_line(
        "1",
        allowance_charge=[
            AllowanceCharge(multiplier_factor_numeric=10, amount=1.0),
            AllowanceCharge(multiplier_factor_numeric=50, amount=5.0),
        ],
    )

    assert map_invoice_details([line])[0].discount_percent == pytest.approx(10)


def test_map_invoice_detail_discount_absent_without_multiplier():
    line = _invoice_line(
        "1",
        allowance_charge=[
            AllowanceCharge(amount=1.0),
            AllowanceCharge(multiplier_factor_numeric=50, amount=5.0),
        ],
    )

    assert map_invoice_details([line])[0].discount_percent is None
    assert map_invoice_details([_invoice_line("2")])[0].discount_percent is None


def test_map_invoice_detail_requires_price():
    with pytest.raises(MissingRequiredStructureError, match=r"InvoiceLine\[7\]/Price/PriceAmount"):
        map_invoice_details([_invoice_line("7", price=None)])

    with pytest.raises(MissingRequiredStructureError):
        map_invoice_details([_invoice_line("8", price=Price())])


def test_map_credit_note_details():
    lines = [
        CreditNoteLine(
            id="1",
            credited_quantity=3,
            item=Item(description=["Returned widget"], name="Widget", seller_item_id="SKU1"),
            price=Price(price_amount=30.0),
        ),
        CreditNoteLine(
            id="2",
            credited_quantity=1.99,
            allowance_charge=[AllowanceCharge(multiplier_factor_numeric=12.5)],
            item=Item(name="Name only", seller_item_id="SKU2"),
            price=Price(price_amount=4.5),
        ),
    ]

    assert map_credit_note_details(lines) == [
        Detail(quantity=3, unit_price=30.0, item_id="SKU1", description="Returned widget"),
        Detail(quantity=1, unit_price=4.5, item_id="SKU2", discount_percent=12.5),
    ]


def test_map_credit_note_detail_requires_price():
    with pytest.raises(MissingRequiredStructureError, match=r"CreditNoteLine\[1\]"):
        map_credit_note_details([CreditNoteLine(id="1", credited_quantity=1)])
