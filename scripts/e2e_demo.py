#!/usr/bin/env python3
"""
End-to-end demo script for the Contract Extraction Service.

Prerequisites:
    1. API running: uvicorn app.main:app
    2. OPENAI_API_KEY set in .env

Usage:
    python scripts/e2e_demo.py --file path/to/contract.txt

    # Read the contract from stdin:
    cat contrato.txt | python scripts/e2e_demo.py

    # Output raw JSON:
    python scripts/e2e_demo.py --file contract.txt --json
"""

import argparse
import json
import sys
from pathlib import Path

import httpx

# Configuration
API_BASE = "http://localhost:8000"
REQUEST_TIMEOUT = 120.0  # seconds; must exceed the server's model timeout

SAMPLE_CONTRACT = (
    "This Agreement is between Acme Corp and Beta LLC, effective Jan 1 2024 "
    "for a term of two years. Late payment incurs a 5% penalty."
)


def check_health(client: httpx.Client) -> bool:
    """Check if API is healthy."""
    try:
        resp = client.get(f"{API_BASE}/health")
        return resp.status_code == 200
    except httpx.RequestError:
        return False


def check_readiness(client: httpx.Client) -> dict:
    """Check readiness of the model provider."""
    try:
        resp = client.get(f"{API_BASE}/health/ready")
        return resp.json()
    except httpx.RequestError as e:
        return {"error": str(e)}


def extract_contract(client: httpx.Client, contract_text: str) -> dict:
    """Submit contract text and return the extracted record."""
    resp = client.post(f"{API_BASE}/api/extract", json={"contractText": contract_text})
    resp.raise_for_status()
    return resp.json()


def _print_list(title: str, items: list, empty_text: str) -> None:
    print(f"\n--- {title} ---")
    if not items:
        print(f"  {empty_text}")
        return
    for item in items:
        print(f"  • {item}")


def print_extraction_result(result: dict) -> None:
    """Pretty print the seven extracted fields."""
    print("\n" + "=" * 60)
    print("EXTRACTED INFORMATION")
    print("=" * 60)

    _print_list(
        "Signing Parties",
        result.get("signingParties") or [],
        "No signing parties identified",
    )

    print("\n--- Dates and Duration ---")
    print(f"  Start Date: {result.get('startDate') or 'Not specified'}")
    print(f"  End Date:   {result.get('endDate') or 'Not specified'}")
    print(f"  Duration:   {result.get('duration') or 'Not specified'}")

    print("\n--- Contract Purpose ---")
    print(f"  {result.get('contractPurpose') or 'Not identified'}")

    _print_list("Penalties", result.get("penalties") or [], "No penalties identified")
    _print_list("Key Clauses", result.get("keyClauses") or [], "No key clauses identified")

    print("\n" + "=" * 60)


def read_contract(file_path) -> str:
    """Read contract text from a file, stdin, or fall back to the sample."""
    if file_path is not None:
        return file_path.read_text(encoding="utf-8")
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return SAMPLE_CONTRACT


def main():
    parser = argparse.ArgumentParser(description="E2E demo for the Contract Extraction Service")
    parser.add_argument("--file", "-f", type=Path, help="Path to a plain-text contract")
    parser.add_argument("--json", action="store_true", help="Output raw JSON")
    args = parser.parse_args()

    if args.file is not None and not args.file.exists():
        print(f"Error: file not found: {args.file}")
        sys.exit(1)

    contract_text = read_contract(args.file)
    if not contract_text.strip():
        print("Please paste a contract to analyze")
        sys.exit(1)

    print("=" * 60)
    print("CONTRACT EXTRACTION SERVICE - E2E DEMO")
    print("=" * 60)

    with httpx.Client(timeout=REQUEST_TIMEOUT) as client:
        print("\n[1/3] Checking API health...")
        if not check_health(client):
            print("  Error: API is not responding. Start it with 'uvicorn app.main:app'.")
            sys.exit(1)
        print("  API is healthy")

        print("\n[2/3] Checking model provider...")
        readiness = check_readiness(client)
        if "error" in readiness:
            print(f"  Error: {readiness['error']}")
            sys.exit(1)
        for service, status in readiness.get("checks", {}).items():
            icon = "OK" if status == "ok" else "FAIL"
            print(f"  {service}: {icon}")
        if readiness.get("status") != "ok":
            print("  Error: model provider is not configured")
            sys.exit(1)

        print(f"\n[3/3] Extracting ({len(contract_text)} chars, model {readiness.get('model')})...")
        try:
            result = extract_contract(client, contract_text)
        except httpx.HTTPStatusError as e:
            try:
                message = e.response.json().get("error", e.response.text)
            except ValueError:
                message = e.response.text
            print(f"  Error: {message}")
            sys.exit(1)

    if args.json:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        print_extraction_result(result)


if __name__ == "__main__":
    main()
