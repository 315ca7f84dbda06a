"""Client-side ordering of the company list."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

Comparable = Union[str, int]
Accessor = Callable[[Mapping[str, Any]], Optional[Comparable]]


class SortField(str, Enum):
    ID = "id"
    COMPANY_NAME = "companyName"
    WEBSITE = "website"
    CONTACT_DATE = "contactDate"
    CITY = "city"
    STATE = "state"
    ZIP = "zip"
    COMPANY_SIZE = "companySize"
    COMPANY_TYPE = "companyType"
    INDUSTRY = "industry"
    FOUNDED_YEAR = "foundedYear"
    HEADQUARTERS = "headquarters"
    CONTACT_EMAIL = "contactEmail"
    APPLICATION_STATUS = "applicationStatus"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


def _text(key: str) -> Accessor:
    def get(record: Mapping[str, Any]) -> Optional[str]:
        value = record.get(key)
        return None if value is None else str(value)
    return get


def _integer(key: str) -> Accessor:
    def get(record: Mapping[str, Any]) -> Optional[int]:
        value = record.get(key)
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            # unparseable counts as absent
            return None
    return get


# ISO dates and timestamps order correctly as text
FIELD_ACCESSORS: Dict[SortField, Accessor] = {
    field: (_integer(field.value) if field is SortField.ID else _text(field.value))
    for field in SortField
}


def sort_companies(
    records: Sequence[Mapping[str, Any]],
    field: SortField,
    direction: SortDirection = SortDirection.ASC,
) -> List[Mapping[str, Any]]:
    """Return a new list ordered by ``field``.

    Records with no value for the field go last in both directions.
    """
    accessor = FIELD_ACCESSORS[SortField(field)]
    present = [r for r in records if accessor(r) is not None]
    absent = [r for r in records if accessor(r) is None]
    present.sort(key=accessor, reverse=SortDirection(direction) is SortDirection.DESC)
    return present + absent


@dataclass
class SortState:
    field: SortField = SortField.COMPANY_NAME
    direction: SortDirection = SortDirection.ASC

    def select(self, field: SortField) -> None:
        """Same field flips the direction; a new field starts ascending."""
        field = SortField(field)
        if field is self.field:
            self.direction = self.direction.flipped()
        else:
            self.field = field
            self.direction = SortDirection.ASC

    def apply(self, records: Sequence[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
        return sort_companies(records, self.field, self.direction)

    def indicator(self, field: SortField) -> str:
        if SortField(field) is not self.field:
            return ""
        return "↑" if self.direction is SortDirection.ASC else "↓"
