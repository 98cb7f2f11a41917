#!/usr/bin/env python3
"""
Prescription Parsing Script

Parses a Russian prescription and prints the recognized medications as
JSON. Optionally lays them out as a daily course.

Usage:
    python scripts/parse_prescription.py --text "Називин 2 капли 3 раза в день 7 дней"
    python scripts/parse_prescription.py --file prescription.txt --schedule
    cat prescription.txt | python scripts/parse_prescription.py --verbose
"""

import argparse
import json
import sys
from datetime import date
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from medication_schedule.parser import PrescriptionParser
from medication_schedule.schedule import ScheduleBuilder
from medication_schedule.utils import (
    configure_logging,
    NoMedicationsRecognizedError,
)


def read_input(args) -> str:
    if args.text is not None:
        return args.text
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    return sys.stdin.read()


def main():
    parser = argparse.ArgumentParser(description="Parse a prescription into medications")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--text", type=str, help="Prescription text")
    source.add_argument("--file", type=str, help="Read prescription text from a file")
    parser.add_argument("--schedule", action="store_true", help="Also build a daily course")
    parser.add_argument("--start-date", type=date.fromisoformat, help="Course start (YYYY-MM-DD)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logs")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines")
    args = parser.parse_args()

    configure_logging(
        level="DEBUG" if args.verbose else "WARNING",
        format_json=True if args.json_logs else None,
    )

    text = read_input(args)

    try:
        items = PrescriptionParser().parse_or_raise(text)
    except NoMedicationsRecognizedError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.schedule:
        course = ScheduleBuilder().build_course(items, start_date=args.start_date)
        output = course.to_dict()
    else:
        output = [item.to_dict() for item in items]

    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
