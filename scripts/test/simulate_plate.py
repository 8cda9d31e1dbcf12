# scripts/test/simulate_plate.py
"""Call registerPlate / queryPlateStatus on a running backend."""

import argparse
import requests

BACKEND_URL = "http://127.0.0.1:8080/api/v1"


def register(plate, base_url):
    resp = requests.post(f"{base_url}/plates/register", json={"plate": plate}, timeout=10)
    print(f"📝 registerPlate plate={plate!r} → HTTP {resp.status_code}: {resp.json()}")


def query(plate, base_url):
    resp = requests.post(f"{base_url}/plates/status", json={"plate": plate}, timeout=10)
    print(f"🔍 queryPlateStatus plate={plate!r} → HTTP {resp.status_code}: {resp.json()}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Exercise the plate operations")
    parser.add_argument("--op", default="both", choices=["register", "query", "both"])
    parser.add_argument("--plate", default="ABC-1D23")
    parser.add_argument("--url", default=BACKEND_URL)
    args = parser.parse_args()

    if args.op in ("register", "both"):
        register(args.plate, args.url)
    if args.op in ("query", "both"):
        query(args.plate, args.url)
