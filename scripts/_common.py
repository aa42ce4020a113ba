"""
Common utilities shared across journey scripts.

This module puts the backend package on the import path, loads .env, and
provides the export-file helpers and record-store selection the scripts
share.
"""

import json
import sys
from argparse import ArgumentParser, Namespace
from datetime import date
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

# Add backend to path for imports (must be before journey.* imports)
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

# Load environment variables from project root .env
project_root = Path(__file__).parent.parent
if (project_root / ".env").exists():
    load_dotenv(project_root / ".env")
else:
    load_dotenv(project_root / "backend" / ".env")


def load_export(path: Path) -> dict[str, Any]:
    """Load a client-state export (storage key → value) from a JSON file."""
    if not path.exists():
        print(f"❌ Export not found: {path}")
        sys.exit(1)

    with open(path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        print(f"❌ Export must be a JSON object keyed by storage key: {path}")
        sys.exit(1)
    return data


def save_export(path: Path, data: dict[str, Any]) -> None:
    """Write a client-state export back to disk."""
    with open(path, "w") as f:
        json.dump(data, f, indent=2)
        f.write("\n")


def parse_day(value: Optional[str]) -> Optional[date]:
    """Parse a --today argument (YYYY-MM-DD)."""
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        print(f"❌ Invalid date: {value} (expected YYYY-MM-DD)")
        sys.exit(1)


def add_common_args(parser: ArgumentParser) -> ArgumentParser:
    """Add record-source and evaluation-day arguments to a parser."""
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--export",
        "-e",
        type=Path,
        metavar="FILE",
        help="Client-state export (JSON object keyed by storage key)",
    )
    source.add_argument(
        "--redis",
        action="store_true",
        help="Read records from the Redis mirror (REDIS_URL)",
    )
    parser.add_argument(
        "--today",
        metavar="YYYY-MM-DD",
        help="Evaluation day (default: today in TIMEZONE)",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=["summary", "json"],
        default="summary",
        help="Output format (default: summary)",
    )
    return parser


def open_store(args: Namespace):
    """
    Build the record store selected by --export or --redis.

    Returns:
        The record store.
    """
    if args.redis:
        from journey.db.redis import RedisRecordStore

        return RedisRecordStore()

    from journey.db.store import InMemoryRecordStore

    return InMemoryRecordStore.from_export(load_export(args.export))
