from datetime import date
from pathlib import Path
from typing import cast

import pytest

from ciuspt2ddl.ubl.credit_note import CreditNote
from ciuspt2ddl.ubl.ubl_document import parse_ubl_document

REPO_ROOT = Path(__file__).resolve().parents[1]
FIXTURES_DIR = REPO_ROOT / "tests" / "fixtures"
SAMPLE_CREDIT_NOTE_PATH = FIXTURES_DIR / "credit_note-full.xml"


def test_parse_credit_note():
    """Test parsing of a sample credit note."""
    credit_note: CreditNote = cast(CreditNote, parse_ubl_document(SAMPLE_CREDIT_NOTE_PATH))

    assert isinstance(credit_note, CreditNote)
    assert credit_note.id == "NC B/2024/3"
    assert credit_note.document_currency_code == "EUR"
    assert credit_note.issue_date == date(2024, 6, 1)
    assert credit_note.credit_note_type_code == "381"
    assert credit_note.buyer_reference == "BUYER-REF-12"
    assert credit_note.order_reference is None
    assert credit_note.delivery == []
    assert credit_note.legal_monetary_total is not None
    assert credit_note.legal_monetary_total.tax_inclusive_amount == pytest.approx(55.35)
    assert credit_note.legal_monetary_total.allowance_total_amount is None


def test_parse_credit_note_lines():
    """Credited quantities and items are read from CreditNoteLine elements."""
    credit_note: CreditNote = cast(CreditNote, parse_ubl_document(SAMPLE_CREDIT_NOTE_PATH))

    assert [line.credited_quantity for line in credit_note.credit_note_line] == [4, 1]
    first = credit_note.credit_note_line[0]
    assert first.item is not None
    assert first.item.description is None
    assert first.item.name == "Parafuso M6"
    assert first.allowance_charge[0].multiplier_factor_numeric is None
    assert credit_note.credit_note_line[1].allowance_charge[0].multiplier_factor_numeric == pytest.approx(10)
