#!/usr/bin/env python3
"""
Populate Companies: asks an OpenAI chat model for biotech companies and stores them

What it does
------------
- Prompts the model for N biotech companies in the Western United States
- Accepts {"companies": [...]}, {"companies": {...}} or a single company object
- Maps the model's snake_case keys onto CompanyRecord fields
- Saves the mapped records to JSON and CSV
- (If DB enabled) inserts each record through the company service

Run examples
------------
# Fetch 5 companies, save JSON/CSV and insert into Postgres (DB_URL from .env)
python scripts/populate_companies.py --count 5

# Only write JSON/CSV, skip the database
python scripts/populate_companies.py --count 10 --no-db --outdir scripts/output

Requirements
------------
OPENAI_API_KEY must be set (environment or .env).
"""

from __future__ import annotations
import argparse
import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pandas as pd
from openai import OpenAI

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "backend"))

from config import DB_URL, LOG_LEVEL, OPENAI_API_KEY, OPENAI_MODEL  # noqa: E402
from db import init_db, make_engine, make_session_factory  # noqa: E402
from errors import CompanyServiceError  # noqa: E402
from services.company_service import CompanyService  # noqa: E402
from services.company_store import CompanyStore  # noqa: E402

logger = logging.getLogger(__name__)

# ------------------------ Config ------------------------
DEFAULT_MODEL = OPENAI_MODEL
DEFAULT_DB_URL = DB_URL

SYSTEM_PROMPT = """You are a biotech industry expert. Provide detailed information about biotech companies in the Western United States. For each company, provide:
1. Company name
2. Website URL
3. Location (city, state)
4. Company description
5. Products/technologies
6. Company size
7. Industry focus
8. Founded year
9. Headquarters
10. Contact information
11. Job opportunities

Format the response as a JSON object with a "companies" array. Use the keys company_name, website_url, location, company_description, products_technologies, company_size, industry_focus, founded_year, headquarters, contact_information (with email and phone_number) and job_opportunities."""


def user_prompt(count: int) -> str:
    return f"""Please provide information about {count} major biotech companies in the Western United States, including Boston Scientific. Focus on companies that:
- Are actively hiring
- Have strong R&D programs
- Are well-established
- Have innovative technologies
- Are known for good workplace culture

Include specific details about their products, technologies, and job opportunities."""


# ------------------------ LLM ------------------------

def extract_companies(content: Optional[str]) -> List[Dict[str, Any]]:
    """Pull the company list out of the model's JSON reply."""
    if not content:
        raise ValueError("No response from OpenAI")
    parsed = json.loads(content)
    if not isinstance(parsed, dict):
        raise ValueError("Response is not a JSON object")
    companies = parsed.get("companies")
    if isinstance(companies, list):
        return [c for c in companies if isinstance(c, dict)]
    if isinstance(companies, dict):
        return [companies]
    if parsed.get("company_name"):
        return [parsed]
    raise ValueError("Response does not contain companies array or company object")


def fetch_companies(client: OpenAI, count: int, model: str = DEFAULT_MODEL) -> List[Dict[str, Any]]:
    completion = client.chat.completions.create(
        model=model,
        messages=[
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": user_prompt(count)},
        ],
        response_format={"type": "json_object"},
    )
    content = completion.choices[0].message.content
    logger.debug("Raw OpenAI response: %s", content)
    return extract_companies(content)


# ------------------------ Mapping ------------------------

def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, list):
        value = "; ".join(str(v) for v in value)
    text = str(value).strip()
    return text or None


def to_record(company: Dict[str, Any], now: Optional[datetime] = None) -> Dict[str, Any]:
    """Model output (snake_case) -> CompanyRecord (camelCase)."""
    now = now or datetime.now(timezone.utc)
    location = company.get("location") or ""
    if isinstance(location, dict):
        city, state = location.get("city"), location.get("state")
    else:
        parts = [p.strip() for p in str(location).split(",")]
        city = parts[0] if parts and parts[0] else None
        state = parts[1] if len(parts) > 1 and parts[1] else None
    contact = company.get("contact_information")
    if not isinstance(contact, dict):
        contact = {}
    return {
        "companyName": _clean(company.get("company_name")),
        "website": _clean(company.get("website_url")),
        "city": _clean(city),
        "state": _clean(state),
        "companyDescription": _clean(company.get("company_description")),
        "companyProducts": _clean(company.get("products_technologies")),
        "companySize": _clean(company.get("company_size")),
        "industry": _clean(company.get("industry_focus")),
        "foundedYear": _clean(company.get("founded_year")),
        "headquarters": _clean(company.get("headquarters")),
        "contactEmail": _clean(contact.get("email")),
        "contactPhone": _clean(contact.get("phone_number")),
        "notes": _clean(company.get("job_opportunities")),
        "createdAt": now.isoformat(),
        "updatedAt": now.isoformat(),
    }


# ------------------------ DB ------------------------

def insert_companies(service: CompanyService, records: List[Dict[str, Any]]) -> int:
    inserted = 0
    for r in records:
        try:
            service.create(r)
        except CompanyServiceError as e:
            print(f"[WARN] Failed to insert {r.get('companyName')}: {e.details or e.message}")
            continue
        inserted += 1
        print(f"[OK] Inserted company: {r.get('companyName')}")
    return inserted


def service_for(db_url: str) -> CompanyService:
    engine = make_engine(db_url)
    init_db(engine)
    return CompanyService(CompanyStore(make_session_factory(engine)))


# ------------------------ Main flow ------------------------

def run(count: int, model: str, outdir: Optional[str], db_url: Optional[str],
        client: Optional[OpenAI] = None) -> List[Dict[str, Any]]:
    client = client or OpenAI(api_key=OPENAI_API_KEY)

    print("[INFO] Fetching company data...")
    companies = fetch_companies(client, count, model)
    print(f"[INFO] Fetched {len(companies)} companies")
    records = [to_record(c) for c in companies]

    if outdir:
        os.makedirs(outdir, exist_ok=True)
        json_path = os.path.join(outdir, "companies.json")
        csv_path = os.path.join(outdir, "companies.csv")
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(records, f, ensure_ascii=False, indent=2)
        pd.DataFrame(records).to_csv(csv_path, index=False, encoding="utf-8")
        print(f"[OK] JSON: {json_path}")
        print(f"[OK] CSV : {csv_path}")

    if db_url:
        print("[INFO] Inserting companies into database...")
        inserted = insert_companies(service_for(db_url), records)
        print(f"[OK] Inserted {inserted}/{len(records)} companies")

    return records


# ------------------------ CLI ------------------------

def cli():
    ap = argparse.ArgumentParser(description="Generate biotech company records with an OpenAI model")
    ap.add_argument("--count", type=int, default=5, help="How many companies to request (default 5)")
    ap.add_argument("--model", type=str, default=DEFAULT_MODEL, help="Chat completion model")
    ap.add_argument("--outdir", type=str, default=os.path.join("scripts", "output"), help="Output directory")
    ap.add_argument("--db-url", type=str, default=DEFAULT_DB_URL, help="SQLAlchemy DB URL")
    ap.add_argument("--no-db", action="store_true", help="Skip DB insert (only write JSON/CSV)")
    args = ap.parse_args()

    logging.basicConfig(level=LOG_LEVEL)
    if not OPENAI_API_KEY:
        print("[FATAL] OPENAI_API_KEY is not set")
        sys.exit(2)

    try:
        run(count=args.count,
            model=args.model,
            outdir=args.outdir,
            db_url=None if args.no_db else args.db_url)
    except ValueError as e:
        print(f"[FATAL] Could not parse model response: {e}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
