from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import CheckConstraint, Date, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from db import Base

APPLICATION_STATUSES = ("Applied", "Interviewing", "Offered", "Rejected", "Not Applied")

# wire key (camelCase) -> column attribute
FIELD_COLUMNS: Dict[str, str] = {
    "companyName": "company_name",
    "website": "website",
    "jobDescriptionUrl": "job_description_url",
    "jobDescriptionText": "job_description_text",
    "contactDate": "contact_date",
    "city": "city",
    "state": "state",
    "zip": "zip",
    "companyProducts": "company_products",
    "companyDescription": "company_description",
    "companySize": "company_size",
    "companyType": "company_type",
    "industry": "industry",
    "foundedYear": "founded_year",
    "headquarters": "headquarters",
    "contactEmail": "contact_email",
    "contactPhone": "contact_phone",
    "applicationStatus": "application_status",
    "notes": "notes",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}

DATE_FIELDS = ("contactDate",)
TIMESTAMP_FIELDS = ("createdAt", "updatedAt")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _status_check() -> str:
    allowed = ", ".join(f"'{s}'" for s in APPLICATION_STATUSES + ("",))
    return f"application_status IS NULL OR application_status IN ({allowed})"


class Company(Base):
    __tablename__ = "biotech_companies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    website: Mapped[Optional[str]] = mapped_column(Text)
    job_description_url: Mapped[Optional[str]] = mapped_column(Text)
    job_description_text: Mapped[Optional[str]] = mapped_column(Text)
    contact_date: Mapped[Optional[date]] = mapped_column(Date)
    city: Mapped[Optional[str]] = mapped_column(String(120))
    state: Mapped[Optional[str]] = mapped_column(String(120))
    zip: Mapped[Optional[str]] = mapped_column(String(20))
    company_products: Mapped[Optional[str]] = mapped_column(Text)
    company_description: Mapped[Optional[str]] = mapped_column(Text)
    company_size: Mapped[Optional[str]] = mapped_column(String(120))
    company_type: Mapped[Optional[str]] = mapped_column(String(120))
    industry: Mapped[Optional[str]] = mapped_column(String(255))
    founded_year: Mapped[Optional[str]] = mapped_column(String(16))
    headquarters: Mapped[Optional[str]] = mapped_column(String(255))
    contact_email: Mapped[Optional[str]] = mapped_column(String(255))
    contact_phone: Mapped[Optional[str]] = mapped_column(String(60))
    application_status: Mapped[Optional[str]] = mapped_column(String(32))
    notes: Mapped[Optional[str]] = mapped_column(Text)
    created_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    __table_args__ = (
        CheckConstraint("company_name <> ''", name="ck_biotech_companies_name_not_empty"),
        CheckConstraint(_status_check(), name="ck_biotech_companies_application_status"),
    )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"id": self.id}
        for key, attr in FIELD_COLUMNS.items():
            value = getattr(self, attr)
            if isinstance(value, (date, datetime)):
                value = value.isoformat()
            out[key] = value
        return out
