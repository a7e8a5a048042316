"""RoadSimilar Documents - Indexable and Stored Documents.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class FieldOptions:
    """Field mapping definition.

    Attributes:
        name: Field name
        analyzer: Registered analyzer name for text fields
        indexed: Whether the field's terms go into the inverted index
        stored: Whether original values are kept for retrieval
        term_vectors: Whether per-document term frequency vectors are kept
    """

    name: str
    analyzer: str = "standard"
    indexed: bool = True
    stored: bool = True
    term_vectors: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "analyzer": self.analyzer,
            "indexed": self.indexed,
            "stored": self.stored,
            "term_vectors": self.term_vectors,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FieldOptions":
        return cls(
            name=data["name"],
            analyzer=data.get("analyzer", "standard"),
            indexed=data.get("indexed", True),
            stored=data.get("stored", True),
            term_vectors=data.get("term_vectors", False),
        )


@dataclass
class Document:
    """Document for indexing.

    Field values are strings or lists of strings (multi-valued fields).
    Non-string scalars are indexed by their string form.

    Attributes:
        id: Unique document identifier (generated when empty)
        fields: Document fields and values
    """

    id: str = ""
    fields: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.id:
            self.id = str(uuid.uuid4())

    def get(self, field_name: str, default: Any = None) -> Any:
        return self.fields.get(field_name, default)

    def set(self, field_name: str, value: Any) -> None:
        self.fields[field_name] = value

    def values(self, field_name: str) -> List[str]:
        """All values of a field as strings."""
        value = self.fields.get(field_name)
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [str(v) for v in value if v is not None]
        return [str(value)]

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "fields": self.fields}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Document":
        return cls(id=data.get("id", ""), fields=data.get("fields", {}))


@dataclass
class StoredDocument:
    """A document as returned by the index reader.

    Attributes:
        doc_id: Document identifier
        content: Stored values per field
    """

    doc_id: str
    content: Dict[str, List[str]] = field(default_factory=dict)

    def get_values(self, field_name: str) -> List[str]:
        """All stored values of a field, empty if none."""
        return list(self.content.get(field_name, []))

    def get(self, field_name: str, default: Optional[str] = None) -> Optional[str]:
        """First stored value of a field."""
        values = self.content.get(field_name)
        return values[0] if values else default


__all__ = ["FieldOptions", "Document", "StoredDocument"]
