#!/usr/bin/env python3
"""
Seed Companies: posts every record in a JSON file to the running API

Run examples
------------
python scripts/seed_companies.py
python scripts/seed_companies.py --file scripts/output/companies.json --api-url http://localhost:5001/companies
"""

from __future__ import annotations
import argparse
import json
import os
import sys
from typing import Any, Dict, List, Tuple

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from frontend.client import DEFAULT_API_URL, ApiError, CompaniesClient  # noqa: E402

DEFAULT_DATA_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "seed_companies.json")


def load_companies(path: str) -> List[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of companies")
    return data


def seed(client: CompaniesClient, companies: List[Dict[str, Any]]) -> Tuple[int, int]:
    """POST each company; returns (added, failed)."""
    added = failed = 0
    for company in companies:
        name = company.get("companyName")
        try:
            client.create_company(company)
        except ApiError as e:
            failed += 1
            print(f"[WARN] Failed: {name} - {e.status_code} {e.payload if e.payload is not None else e}")
            continue
        added += 1
        print(f"[OK] Added: {name}")
    return added, failed


def cli():
    ap = argparse.ArgumentParser(description="POST seed companies to the companies API")
    ap.add_argument("--api-url", type=str, default=DEFAULT_API_URL, help="Companies endpoint URL")
    ap.add_argument("--file", type=str, default=DEFAULT_DATA_PATH, help="JSON array of company records")
    args = ap.parse_args()

    companies = load_companies(args.file)
    added, failed = seed(CompaniesClient(args.api_url), companies)
    print(f"[INFO] Seeded {added} companies, {failed} failed")
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    cli()
