"""SQLAlchemy-backed persistence for company records."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.orm import sessionmaker

from errors import InvalidArgument
from models.company import Company


class CompanyStore:
    """Insert/select/update/delete over the biotech_companies table.

    Every method runs in its own session and hands back plain dicts, so no
    ORM instance escapes a closed session. SQLAlchemy errors propagate.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def select_all(self) -> List[Dict[str, Any]]:
        with self._session_factory() as s:
            rows = s.scalars(select(Company).order_by(Company.id)).all()
            return [r.to_dict() for r in rows]

    def count(self) -> int:
        with self._session_factory() as s:
            return int(s.scalar(select(func.count()).select_from(Company)) or 0)

    def insert(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        company = Company(**fields)
        with self._session_factory() as s:
            s.add(company)
            try:
                s.commit()
            except Exception:
                s.rollback()
                raise
            s.refresh(company)
            return company.to_dict()

    def update_by_id(self, company_id: int, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with self._session_factory() as s:
            company = s.get(Company, company_id)
            if company is None:
                return None
            for attr, value in fields.items():
                setattr(company, attr, value)
            try:
                s.commit()
            except Exception:
                s.rollback()
                raise
            s.refresh(company)
            return company.to_dict()

    def delete_by_id(self, company_id: Optional[int]) -> bool:
        if company_id is None:
            raise InvalidArgument("ID is required")
        with self._session_factory() as s:
            try:
                result = s.execute(delete(Company).where(Company.id == company_id))
                s.commit()
            except Exception:
                s.rollback()
                raise
            return (result.rowcount or 0) > 0
