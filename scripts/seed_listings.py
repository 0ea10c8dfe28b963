#!/usr/bin/env python3
"""
Seed business listings with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Messy on purpose: some cities carry stray whitespace or odd casing and
  some fields are missing, like scraped listing data

Usage:
    python scripts/seed_listings.py                      # into DATABASE_URL
    python scripts/seed_listings.py --json data/listings.json
"""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path
from typing import Any

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from listing_reports.infra.db.models.listing import ListingRow
from listing_reports.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_LISTINGS = 60


# ==============================================================================
# Listing Data
# ==============================================================================

CITIES_BY_STATE = {
    "TX": ["Austin", "Dallas", "Houston", "San Antonio"],
    "CA": ["Los Angeles", "San Diego", "Sacramento"],
    "NY": ["New York", "Buffalo"],
    "IL": ["Chicago"],
}

CATEGORIES = [
    "Cafe",
    "Bakery",
    "Coffee Shop",
    "Restaurant",
    "Italian Restaurant",
    "Hair Salon",
    "Dentist",
    "Auto Repair",
    "Gym",
    "Florist",
]

NAME_PREFIXES = ["Golden", "Blue", "Corner", "Main Street", "Sunrise", "Lone Star", "Urban", "Old Town"]
NAME_SUFFIXES = {
    "Cafe": ["Cafe", "Coffee House"],
    "Bakery": ["Bakery", "Bread Co."],
    "Coffee Shop": ["Roasters", "Brew Bar"],
    "Restaurant": ["Grill", "Kitchen", "Diner"],
    "Italian Restaurant": ["Trattoria", "Pizzeria"],
    "Hair Salon": ["Salon", "Cuts"],
    "Dentist": ["Dental", "Smiles"],
    "Auto Repair": ["Auto", "Garage"],
    "Gym": ["Fitness", "Gym"],
    "Florist": ["Flowers", "Blooms"],
}

STREETS = ["Congress Ave", "Main St", "Elm St", "Oak Blvd", "5th Ave", "Market St", "Lake Dr"]


# ==============================================================================
# Generation
# ==============================================================================


def messy_city(city: str) -> str:
    """Scraped city values are not always clean."""
    roll = random.random()
    if roll < 0.10:
        return f"{city} "
    if roll < 0.15:
        return city.lower()
    if roll < 0.18:
        return f"  {city.upper()}"
    return city


def generate_listing() -> dict[str, Any]:
    state = random.choice(list(CITIES_BY_STATE.keys()))
    city = random.choice(CITIES_BY_STATE[state])
    category = random.choice(CATEGORIES)
    name = f"{random.choice(NAME_PREFIXES)} {random.choice(NAME_SUFFIXES[category])}"
    slug = name.lower().replace(" ", "").replace(".", "")

    reviews_count = random.randint(0, 1500)
    has_reviews = reviews_count > 0

    return {
        "name": name,
        "address": f"{random.randint(1, 9999)} {random.choice(STREETS)}, {city}, {state}",
        "website": f"https://{slug}.example.com" if random.random() < 0.8 else None,
        "phone_number": f"{random.randint(200, 989)}-555-{random.randint(0, 9999):04d}",
        "reviews_count": str(reviews_count),
        "reviews_average": f"{random.uniform(2.5, 5.0):.1f}" if has_reviews else None,
        "category": category,
        "city": messy_city(city),
        "state": state,
    }


def generate_listings(num_listings: int = NUM_LISTINGS, seed: int = RANDOM_SEED) -> list[dict[str, Any]]:
    random.seed(seed)
    return [generate_listing() for _ in range(num_listings)]


def seed_database(listings: list[dict[str, Any]]) -> None:
    with get_session() as session:
        print("🗑️  Clearing existing listings...")
        deleted_count = session.query(ListingRow).delete()
        print(f"   Deleted {deleted_count} existing listings")

        session.add_all(
            ListingRow(position=position, **listing) for position, listing in enumerate(listings)
        )
        session.flush()

    print(f"✅ Seeded {len(listings)} listings into the database")


def dump_json(listings: list[dict[str, Any]], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(listings, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    print(f"✅ Wrote {len(listings)} listings to {path}")


# ==============================================================================
# Main
# ==============================================================================


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--json", type=Path, help="Write listings to this JSON file instead of the database")
    parser.add_argument("--count", type=int, default=NUM_LISTINGS)
    parser.add_argument("--seed", type=int, default=RANDOM_SEED)
    args = parser.parse_args()

    print(f"🌱 Generating {args.count} listings (seed={args.seed})...")
    listings = generate_listings(args.count, args.seed)

    if args.json:
        dump_json(listings, args.json)
    else:
        seed_database(listings)


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print(f"❌ Error seeding listings: {e}", file=sys.stderr)
        sys.exit(1)
