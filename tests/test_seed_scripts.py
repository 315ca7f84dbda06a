"""
Tests for the populate (LLM) and seed (JSON -> API) scripts
"""

import json
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock, Mock

import pytest

import populate_companies
import seed_companies
from frontend.client import ApiError

LLM_COMPANY = {
    "company_name": "Illumina",
    "website_url": "https://www.illumina.com",
    "location": "San Diego, CA",
    "company_description": "Sequencing systems",
    "products_technologies": ["NovaSeq", "MiSeq"],
    "company_size": "10,000+",
    "industry_focus": "Genomics",
    "founded_year": 1998,
    "headquarters": "San Diego, CA",
    "contact_information": {"email": "careers@illumina.com", "phone_number": "858-202-4500"},
    "job_opportunities": "Bioinformatics, R&D",
}


def _openai_returning(content):
    client = MagicMock()
    message = SimpleNamespace(content=content)
    client.chat.completions.create.return_value = SimpleNamespace(choices=[SimpleNamespace(message=message)])
    return client


def test_extract_companies_array():
    content = json.dumps({"companies": [LLM_COMPANY, LLM_COMPANY]})

    assert len(populate_companies.extract_companies(content)) == 2


def test_extract_companies_single_object_under_key():
    content = json.dumps({"companies": LLM_COMPANY})

    assert populate_companies.extract_companies(content) == [LLM_COMPANY]


def test_extract_companies_single_object_at_root():
    assert populate_companies.extract_companies(json.dumps(LLM_COMPANY)) == [LLM_COMPANY]


@pytest.mark.parametrize("content", [None, "", "[]", json.dumps({"data": []})])
def test_extract_companies_rejects_unusable_replies(content):
    with pytest.raises(ValueError):
        populate_companies.extract_companies(content)


def test_to_record_maps_llm_keys():
    now = datetime(2024, 5, 1, tzinfo=timezone.utc)

    record = populate_companies.to_record(LLM_COMPANY, now=now)

    assert record["companyName"] == "Illumina"
    assert record["website"] == "https://www.illumina.com"
    assert record["city"] == "San Diego"
    assert record["state"] == "CA"
    assert record["companyProducts"] == "NovaSeq; MiSeq"
    assert record["industry"] == "Genomics"
    assert record["foundedYear"] == "1998"
    assert record["contactEmail"] == "careers@illumina.com"
    assert record["contactPhone"] == "858-202-4500"
    assert record["notes"] == "Bioinformatics, R&D"
    assert record["createdAt"] == now.isoformat()


def test_to_record_tolerates_missing_location_and_contact():
    record = populate_companies.to_record({"company_name": "Tiny Bio"})

    assert record["city"] is None
    assert record["state"] is None
    assert record["contactEmail"] is None


def test_fetch_companies_requests_json_object():
    client = _openai_returning(json.dumps({"companies": [LLM_COMPANY]}))

    companies = populate_companies.fetch_companies(client, 3, model="gpt-test")

    assert companies == [LLM_COMPANY]
    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "gpt-test"
    assert kwargs["response_format"] == {"type": "json_object"}
    assert "3 major biotech companies" in kwargs["messages"][1]["content"]


def test_insert_companies_skips_failures(service, capsys):
    records = [
        populate_companies.to_record(LLM_COMPANY),
        populate_companies.to_record({"website_url": "https://nameless.example.com"}),
    ]

    inserted = populate_companies.insert_companies(service, records)

    assert inserted == 1
    assert [c["companyName"] for c in service.list()] == ["Illumina"]
    assert "[WARN]" in capsys.readouterr().out


def test_run_writes_outputs_and_inserts(tmp_path, db_url):
    client = _openai_returning(json.dumps({"companies": [LLM_COMPANY]}))
    outdir = tmp_path / "out"

    records = populate_companies.run(count=1, model="gpt-test", outdir=str(outdir), db_url=db_url, client=client)

    assert len(records) == 1
    saved = json.loads((outdir / "companies.json").read_text(encoding="utf-8"))
    assert saved[0]["companyName"] == "Illumina"
    assert (outdir / "companies.csv").read_text(encoding="utf-8").startswith("companyName,")
    assert [c["companyName"] for c in populate_companies.service_for(db_url).list()] == ["Illumina"]


def test_load_companies(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps([{"companyName": "Amgen"}]), encoding="utf-8")

    assert seed_companies.load_companies(str(path)) == [{"companyName": "Amgen"}]


def test_load_companies_requires_array(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({"companyName": "Amgen"}), encoding="utf-8")

    with pytest.raises(ValueError):
        seed_companies.load_companies(str(path))


def test_bundled_seed_file_is_create_compatible(service):
    companies = seed_companies.load_companies(seed_companies.DEFAULT_DATA_PATH)

    for company in companies:
        service.create(company)

    assert len(service.list()) == len(companies)


def test_seed_counts_added_and_failed(capsys):
    client = Mock()
    client.create_company.side_effect = [
        {"id": 1},
        ApiError("POST failed", 500, {"error": "Failed to create company"}),
    ]

    added, failed = seed_companies.seed(client, [{"companyName": "Amgen"}, {"companyName": ""}])

    assert (added, failed) == (1, 1)
    out = capsys.readouterr().out
    assert "[OK] Added: Amgen" in out
    assert "[WARN] Failed:" in out
