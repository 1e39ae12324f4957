"""CIUS-PT XML to DDL `ItemTransaction` conversion.

Each call parses, maps and returns fresh objects; nothing is kept between
calls. The typed UBL document is returned next to the DDL record so callers
that need both do not have to parse twice.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from ciuspt2ddl.config import MappingConfig
from ciuspt2ddl.ddl.models import ItemTransaction
from ciuspt2ddl.mapping.mapper import map_document
from ciuspt2ddl.ubl.ubl_document import UBLDocument, load_ubl_document, read_xml_file, resolve_document_kind
from ciuspt2ddl.ubl.ubl_types import DocumentKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of a single conversion."""

    kind: DocumentKind
    document: UBLDocument
    transaction: ItemTransaction


def convert(xml: str | bytes, config: MappingConfig | None = None) -> ConversionResult:
    """Convert a CIUS-PT Invoice or CreditNote payload to a DDL `ItemTransaction`.

    Args:
        xml: The XML payload.
        config: Mapping choices; defaults to `MappingConfig()`.

    Returns:
        ConversionResult: The resolved kind, the typed document and the DDL record.

    Raises:
        lxml.etree.XMLSyntaxError: If the payload is not well-formed XML.
        UnrecognizedDocumentTypeError: If the root is neither `Invoice` nor `CreditNote`.
        MissingRequiredStructureError: If the document lacks an element the mapping requires.
    """
    kind = resolve_document_kind(xml)
    document = load_ubl_document(xml, kind)
    transaction = map_document(document, kind, config)
    return ConversionResult(kind=kind, document=document, transaction=transaction)


def convert_file(xml_file: str | Path, config: MappingConfig | None = None) -> ConversionResult:
    """Read `xml_file` and convert it, see `convert`.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    logger.debug(f"Converting {xml_file}")
    return convert(read_xml_file(xml_file), config)


def to_json(transaction: ItemTransaction, indent: int = 2) -> str:
    """Render the record as indented JSON, leaving out every field without a value."""
    return transaction.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
