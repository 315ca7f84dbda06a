"""View-model for the company tracker page.

Owns everything the page shows: the loaded list, which record is being
edited, whether the form is open, the loading flag, the last error and the
sort state. Each user action is one synchronous call through the client.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from frontend.client import ApiError, CompaniesClient
from frontend.sorting import SortField, SortState

logger = logging.getLogger(__name__)

LOAD_ERROR = "Failed to load companies. Please try again later."
SAVE_ERROR = "Failed to save company. Please try again."
DELETE_ERROR = "Failed to delete company. Please try again."

FORM_FIELDS = (
    "companyName", "website", "jobDescriptionUrl", "jobDescriptionText", "contactDate",
    "city", "state", "zip", "companyProducts", "companyDescription", "companySize",
    "companyType", "industry", "foundedYear", "headquarters", "contactEmail",
    "contactPhone", "applicationStatus", "notes",
)

STATUS_OPTIONS = ("", "Applied", "Interviewing", "Offered", "Rejected", "Not Applied")


def empty_form() -> Dict[str, str]:
    return {name: "" for name in FORM_FIELDS}


def form_from_record(record: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Prefill the form; absent values show as blank inputs."""
    form = empty_form()
    if record:
        for name in FORM_FIELDS:
            value = record.get(name)
            form[name] = "" if value is None else str(value)
    return form


class CompanyPage:
    def __init__(self, client: CompaniesClient, confirm: Optional[Callable[[str], bool]] = None):
        self.client = client
        self.confirm = confirm or (lambda _message: True)
        self.companies: List[Dict[str, Any]] = []
        self.selected: Optional[Dict[str, Any]] = None
        self.form_visible = False
        self.is_loading = True
        self.error: Optional[str] = None
        self.sort = SortState()

    def load(self) -> None:
        self.is_loading = True
        self.error = None
        try:
            self.companies = self.client.list_companies()
        except ApiError as e:
            logger.error("Failed to fetch companies: %s", e)
            self.error = LOAD_ERROR
            self.companies = []
        finally:
            self.is_loading = False

    def open_new(self) -> None:
        self.selected = None
        self.form_visible = True

    def edit(self, record: Dict[str, Any]) -> None:
        self.selected = record
        self.form_visible = True

    def cancel(self) -> None:
        self.form_visible = False
        self.selected = None

    def form(self) -> Dict[str, str]:
        return form_from_record(self.selected)

    def submit(self, form: Dict[str, Any]) -> bool:
        self.error = None
        try:
            if self.selected is not None:
                self.client.update_company(self.selected["id"], form)
            else:
                self.client.create_company(form)
        except ApiError as e:
            logger.error("Failed to save company: %s (%s)", e, e.payload)
            self.error = SAVE_ERROR
            return False
        self.load()
        self.form_visible = False
        self.selected = None
        return True

    def delete(self, company_id: int) -> bool:
        if not self.confirm("Are you sure you want to delete this company?"):
            return False
        self.error = None
        try:
            self.client.delete_company(company_id)
        except ApiError as e:
            logger.error("Failed to delete company: %s (%s)", e, e.payload)
            self.error = DELETE_ERROR
            return False
        self.load()
        return True

    def sort_by(self, field: SortField) -> None:
        self.sort.select(field)

    def rows(self) -> List[Mapping[str, Any]]:
        return self.sort.apply(self.companies)
