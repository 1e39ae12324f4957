"""Errors raised while converting a UBL document into a DDL record.

Malformed XML is not wrapped: `lxml.etree.XMLSyntaxError` reaches the caller
as raised by the XML reader, as do pydantic-xml loading errors.
"""


class ConversionError(Exception):
    """Base class for fatal conversion errors."""


class UnrecognizedDocumentTypeError(ConversionError, ValueError):
    """Raised when the XML root element is neither `Invoice` nor `CreditNote`."""

    def __init__(self, local_name: str):
        super().__init__(
            f"Unsupported UBL document type '{local_name}'. Supported types are: 'Invoice', 'CreditNote'."
        )
        self.local_name = local_name


class MissingRequiredStructureError(ConversionError, ValueError):
    """Raised when an element the mapping rules cannot do without is absent."""

    def __init__(self, path: str, document_id: str | None = None):
        where = f" in document {document_id}" if document_id else ""
        super().__init__(f"Required element '{path}' is missing{where}")
        self.path = path
        self.document_id = document_id
