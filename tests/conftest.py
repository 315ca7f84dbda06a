"""
Pytest configuration for the company tracker tests.

Every test gets its own SQLite file so nothing touches the configured
Postgres database.
"""

import os

import pytest

# Must be set before config.py is imported anywhere
os.environ["DB_URL"] = "sqlite://"

from app import create_app  # noqa: E402
from db import init_db, make_engine, make_session_factory  # noqa: E402
from services.company_service import CompanyService  # noqa: E402
from services.company_store import CompanyStore  # noqa: E402


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'companies.db'}"


@pytest.fixture
def store(db_url):
    engine = make_engine(db_url)
    init_db(engine)
    yield CompanyStore(make_session_factory(engine))
    engine.dispose()


@pytest.fixture
def service(store):
    return CompanyService(store)


@pytest.fixture
def app(db_url):
    app = create_app(db_url)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def genentech():
    """A complete form submission, as the page sends it"""
    return {
        "companyName": "Genentech",
        "website": "https://www.gene.com",
        "jobDescriptionUrl": "https://careers.gene.com/job/123",
        "jobDescriptionText": "Scientist II, protein engineering",
        "contactDate": "2024-03-01",
        "city": "South San Francisco",
        "state": "CA",
        "zip": "94080",
        "companyProducts": "Oncology and immunology biologics",
        "companyDescription": "Biotechnology company, member of the Roche Group.",
        "companySize": "10,000+",
        "companyType": "Subsidiary",
        "industry": "Biotechnology",
        "foundedYear": "1976",
        "headquarters": "South San Francisco, CA",
        "contactEmail": "recruiting@gene.com",
        "contactPhone": "650-225-1000",
        "applicationStatus": "Applied",
        "notes": "Referred by a former colleague",
    }
