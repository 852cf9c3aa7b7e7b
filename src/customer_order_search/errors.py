from __future__ import annotations


class SearchError(Exception):
    """Base class for failures raised by the search core."""


class InvalidArgument(SearchError, ValueError):
    """A required input was blank or missing."""


class UnrecognizedEntityKind(SearchError):
    def __init__(self, entity_kind: str):
        super().__init__(f"itemType not recognized: {entity_kind!r}")
        self.entity_kind = entity_kind


class FieldNotFound(SearchError, KeyError):
    """A requested field does not exist on a matched document."""

    def __init__(self, field_name: str, document_id: str | None = None):
        super().__init__(field_name)
        self.field_name = field_name
        self.document_id = document_id

    def __str__(self) -> str:
        if self.document_id is not None:
            return f"Field '{self.field_name}' not found on document '{self.document_id}'"
        return f"Field '{self.field_name}' not found"
