#!/usr/bin/env python3
"""
Seed script: creates residents via the API (the registry is in-memory, so the API is the only way in).
Run: API must be running.
  python scripts/seed_residents.py
  python scripts/seed_residents.py --count 200 --base-url http://localhost:8000
"""

import argparse
import random

import httpx

API_BASE = "http://localhost:8000"

FIRST_NAMES = [
    "Jane", "John", "Maria", "Ahmed", "Wei", "Olga", "Kwame", "Sofia", "Lucas", "Aiko",
    "Priya", "Mateo", "Fatima", "Noah", "Elena", "Hiro", "Amara", "Liam", "Zara", "Omar",
]

LAST_NAMES = [
    "Doe", "Smith", "Garcia", "Khan", "Chen", "Ivanova", "Mensah", "Rossi", "Silva", "Tanaka",
    "Patel", "Lopez", "Haddad", "Brown", "Novak", "Sato", "Okafor", "Murphy", "Ali", "Nasser",
]


def random_name() -> str:
    return f"{random.choice(FIRST_NAMES)} {random.choice(LAST_NAMES)}"


def random_age() -> int:
    return random.randint(0, 100)


def main():
    ap = argparse.ArgumentParser(description="Seed residents via API")
    ap.add_argument("--count", type=int, default=50, help="Number of residents to create")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    created = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        health = client.get("/")
        print(f"Health: {health.status_code} {health.json().get('environment', '?')}")

        print(f"Creating {args.count} residents...")
        for i in range(args.count):
            try:
                r = client.post("/api/residents", json={"name": random_name(), "age": random_age()})
                if r.status_code == 201:
                    created += 1
                else:
                    errors.append(f"Resident {i + 1}: {r.status_code} {r.text[:80]}")
            except httpx.HTTPError as e:
                errors.append(f"Resident {i + 1}: {e}")
            if (i + 1) % 10 == 0:
                print(f"  ... {i + 1} residents")

        total = len(client.get("/api/residents").json())

    print(f"\nDone. Created: {created}, now stored: {total}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()
