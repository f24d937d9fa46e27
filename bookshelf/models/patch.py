"""
Partial-update structure

A patch only carries the keys the client actually sent: an absent key leaves
the stored field unchanged, an explicit null clears it.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from .book import BOOK_WRITABLE_FIELDS, BookType, ReadingStatus
from .series import SERIES_WRITABLE_FIELDS


def _optional(converter: Callable[[Any], Any]) -> Callable[[Any], Any]:
    return lambda value: None if value is None else converter(value)


BOOK_CONVERTERS: Dict[str, Callable[[Any], Any]] = {
    "status": ReadingStatus,
    "book_type": _optional(BookType),
}


@dataclass
class RecordPatch:
    """Field-by-field changes for one record"""
    changes: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, Any],
        writable_fields: Iterable[str],
        converters: Optional[Dict[str, Callable[[Any], Any]]] = None,
    ) -> "RecordPatch":
        """Keep only writable keys present in the payload, converted to model types.

        The payload must already have passed validation.
        """
        converters = converters or {}
        changes = {}
        for name in writable_fields:
            if name not in payload:
                continue
            value = payload[name]
            convert = converters.get(name)
            changes[name] = convert(value) if convert else value
        return cls(changes)

    def apply_to(self, record) -> None:
        for name, value in self.changes.items():
            setattr(record, name, value)

    def __contains__(self, name: str) -> bool:
        return name in self.changes

    def __bool__(self) -> bool:
        return bool(self.changes)


def book_patch(payload: Mapping[str, Any]) -> RecordPatch:
    return RecordPatch.from_payload(payload, BOOK_WRITABLE_FIELDS, BOOK_CONVERTERS)


def series_patch(payload: Mapping[str, Any]) -> RecordPatch:
    return RecordPatch.from_payload(payload, SERIES_WRITABLE_FIELDS)
