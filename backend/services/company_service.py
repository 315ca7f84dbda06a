"""Record service: list/create/update/delete over the company store."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from dateutil import parser as dateparser
from sqlalchemy.exc import SQLAlchemyError

from errors import InvalidArgument, NotFound, StoreUnavailable, WriteFailed
from models.company import DATE_FIELDS, FIELD_COLUMNS, TIMESTAMP_FIELDS, utcnow
from services.company_store import CompanyStore

logger = logging.getLogger(__name__)


ID_PATTERN = re.compile(r"-?[0-9]+")

# bounds of the Integer primary key column
MIN_ID = -(2 ** 31)
MAX_ID = 2 ** 31 - 1


def parse_id(value: Any) -> int:
    """Accept an int or a plain ASCII digit string within the id column's range."""
    if value is None or value == "":
        raise InvalidArgument("ID is required")
    if isinstance(value, bool):
        raise InvalidArgument(f"Invalid ID: {value!r}")
    if isinstance(value, str) and ID_PATTERN.fullmatch(value.strip()):
        parsed = int(value.strip())
    elif isinstance(value, int):
        parsed = value
    else:
        raise InvalidArgument(f"Invalid ID: {value!r}")
    if not MIN_ID <= parsed <= MAX_ID:
        raise InvalidArgument(f"Invalid ID: {value!r}")
    return parsed


def _parse_date(value: Any, field: str) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return dateparser.isoparse(value.strip()).date()
        except ValueError:
            raise InvalidArgument(f"{field} must be YYYY-MM-DD", details=value)
    raise InvalidArgument(f"{field} must be YYYY-MM-DD", details=repr(value))


def _parse_timestamp(value: Any, field: str) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return dateparser.isoparse(value.strip())
        except ValueError:
            raise InvalidArgument(f"{field} must be an ISO-8601 timestamp", details=value)
    raise InvalidArgument(f"{field} must be an ISO-8601 timestamp", details=repr(value))


def normalize(record: Dict[str, Any]) -> Dict[str, Any]:
    """Map wire keys to column attributes.

    Empty-string dates and timestamps become None, never "". Numbers sent for
    text fields (an LLM's foundedYear, say) are stored as their string form.
    Keys that are not record fields, including id, are dropped.
    """
    fields: Dict[str, Any] = {}
    for key, value in record.items():
        attr = FIELD_COLUMNS.get(key)
        if attr is None:
            if key != "id":
                logger.debug("Ignoring unknown company field %r", key)
            continue
        if key in DATE_FIELDS:
            value = _parse_date(value, key)
        elif key in TIMESTAMP_FIELDS:
            value = _parse_timestamp(value, key)
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        fields[attr] = value
    return fields


def _describe(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc)


class CompanyService:
    def __init__(self, store: CompanyStore):
        self.store = store

    def list(self) -> List[Dict[str, Any]]:
        try:
            return self.store.select_all()
        except SQLAlchemyError as e:
            logger.error("Error fetching companies: %s", e)
            raise StoreUnavailable("Failed to fetch companies", details=_describe(e)) from e

    def count(self) -> int:
        try:
            return self.store.count()
        except SQLAlchemyError as e:
            raise StoreUnavailable("Failed to count companies", details=_describe(e)) from e

    def create(self, record: Dict[str, Any]) -> Dict[str, Any]:
        fields = normalize(record)
        # store defaults apply to absent timestamps
        for attr in ("created_at", "updated_at"):
            if fields.get(attr) is None:
                fields.pop(attr, None)
        logger.info("Attempting to insert company: %s", fields.get("company_name"))
        try:
            return self.store.insert(fields)
        except SQLAlchemyError as e:
            logger.error("Error inserting company: %s", e)
            raise WriteFailed("Failed to create company", details=_describe(e)) from e

    def update(self, company_id: Any, record: Dict[str, Any]) -> Dict[str, Any]:
        cid = parse_id(company_id)
        fields = normalize(record)
        fields["updated_at"] = utcnow()
        try:
            updated = self.store.update_by_id(cid, fields)
        except SQLAlchemyError as e:
            logger.error("Error updating company %s: %s", cid, e)
            raise WriteFailed("Failed to update company", details=_describe(e)) from e
        if updated is None:
            raise NotFound("Company not found", details=f"id={cid}")
        return updated

    def delete(self, company_id: Any) -> Dict[str, bool]:
        cid = parse_id(company_id)
        try:
            deleted = self.store.delete_by_id(cid)
        except SQLAlchemyError as e:
            logger.error("Error deleting company %s: %s", cid, e)
            raise WriteFailed("Failed to delete company", details=_describe(e)) from e
        if not deleted:
            raise NotFound("Company not found", details=f"id={cid}")
        return {"success": True}
