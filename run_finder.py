"""
Main Execution Script for the Rehearsal Slot Finder.
Loads a band, its availability and a request (from a cached JSON file, or the
seeded sample generator), runs the finder and exports the JSON response body.
"""

import os
import sys
import json
import logging
import argparse
from collections import defaultdict
from datetime import date, timedelta

# Add current directory to path so imports work
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from pydantic import ValidationError

from generators.data_factory import DataGenerator
from models import (
    Member,
    MemberRole,
    QueryWindow,
    availability_adapter,
    roster_for_band,
    build_response
)
from scheduler import FinderConfig, RehearsalFinder

logger = logging.getLogger("Main")

# --- CONFIGURATION ---
CACHE_FILENAME = "sample_band.json"
USE_CACHE = True # Set to False to always regenerate sample data
OUTPUT_FILENAME = "optimal_times.json"
# ---------------------


def save_sample_data(data: dict, filename: str):
    """Helper to save generated data so the same band can be replayed."""
    serializable = {}
    for key, val in data.items():
        if isinstance(val, list):
            serializable[key] = [item.model_dump(mode='json') for item in val]
        else:
            serializable[key] = val.model_dump(mode='json')

    with open(filename, 'w') as f:
        json.dump(serializable, f, indent=2)
    logger.info(f"Saved sample data to {filename}")


def load_input(filename: str):
    """
    Load members, roles, availability and the request from a JSON file and
    rebuild the pydantic objects. Returns None if the file is missing or invalid.
    """
    try:
        with open(filename, 'r') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Input file {filename} not found.")
        return None
    except json.JSONDecodeError as e:
        logger.error(f"Input file {filename} is not valid JSON: {e}")
        return None

    logger.info(f"Loading input from {filename}...")

    if not isinstance(data, dict):
        logger.error(f"Input file {filename} must hold a JSON object, got {type(data).__name__}.")
        return None

    try:
        members = [Member(**item) for item in data.get('members', [])]
        roles = [MemberRole(**item) for item in data.get('roles', [])]
        window = QueryWindow(**data['request'])
    except KeyError:
        logger.error(f"Input file {filename} has no 'request' section.")
        return None
    except TypeError as e:
        logger.error(f"Input file {filename} has a malformed section: {e}")
        return None
    except ValidationError as e:
        logger.error(f"Input file {filename} failed validation: {e}")
        return None

    raw_records = data.get('availability', [])
    if not isinstance(raw_records, list):
        logger.error(f"Input file {filename} has a malformed 'availability' section.")
        return None

    # Invalid availability records are skipped one by one, not fatal
    records = []
    for i, item in enumerate(raw_records):
        try:
            records.append(availability_adapter.validate_python(item))
        except ValidationError as e:
            logger.warning(f"Skipping invalid availability record {i}: {e.json()}")

    availability = defaultdict(list)
    for record in records:
        availability[record.user_id].append(record)

    logger.info(f"Loaded {len(members)} members and {len(records)} availability records.")
    return members, roles, dict(availability), window


def generate_sample(seed: int, start_date: date):
    """Build a sample band and a one-week request."""
    generator = DataGenerator(seed=seed)
    members, roles = generator.generate_band(band_id="band_01", member_count=5)
    availability = generator.generate_availability(members, start_date, weeks=2)
    window = QueryWindow(
        band_id="band_01",
        start_date=start_date,
        end_date=start_date + timedelta(days=6),
        duration_minutes=90,
        minimum_members=2
    )
    return members, roles, availability, window


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Find optimal rehearsal times for a band.")
    parser.add_argument("--input", default=CACHE_FILENAME, help="JSON file with members, roles, availability and request")
    parser.add_argument("--output", default=OUTPUT_FILENAME, help="Where to write the JSON response body")
    parser.add_argument("--seed", type=int, default=42, help="Seed for sample data when no input file exists")
    parser.add_argument("--top-k", type=int, default=None, help="Maximum number of suggestions")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        config = FinderConfig.from_env()
        if args.top_k is not None:
            config = FinderConfig(**{**config.model_dump(), "top_k": args.top_k})
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

    # --- PHASE 1: DATA ACQUISITION (Cache vs. Generator) ---
    loaded = load_input(args.input) if USE_CACHE else None

    if loaded is None:
        if USE_CACHE and os.path.exists(args.input):
            logger.error("Input file exists but could not be used. Exiting.")
            return 1
        logger.info("--- Generating sample band ---")
        members, roles, availability, window = generate_sample(args.seed, date.today())
        all_records = [r for records in availability.values() for r in records]
        save_sample_data({
            "members": members,
            "roles": roles,
            "availability": all_records,
            "request": window
        }, args.input)
    else:
        members, roles, availability, window = loaded

    # Resolve the roster through the join records when the request names a band
    roster = members
    if roles and window.band_id:
        roster = roster_for_band(window.band_id, members, roles)

    # --- PHASE 2: FIND ---
    finder = RehearsalFinder(config)
    slots = finder.find(roster, availability, window)

    # --- PHASE 3: REPORTING ---
    print("\n" + "=" * 50)
    print("SUGGESTED REHEARSAL TIMES")
    print("=" * 50)
    if not slots:
        print("No slot satisfies the request.")
    for rank, slot in enumerate(slots, start=1):
        names = ", ".join(m.full_name for m in slot.available_members)
        print(f"{rank:2d}. {slot.start:%a %Y-%m-%d %H:%M} - {slot.end:%H:%M}  "
              f"[{slot.attendee_count}/{len(roster)}] {names}")

    # --- PHASE 4: EXPORT ---
    with open(args.output, 'w') as f:
        json.dump(build_response(slots), f, indent=2)
    logger.info(f"Exported response to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
