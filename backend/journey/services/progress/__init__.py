"""
Progress Aggregation Services

Turns the raw records of the five tracked domains into a JourneyProgress
snapshot.

Modules:
- loader: Fallible per-domain deserialization of stored collections
- calculators: Journal, reading, tasks, vocabulary and life-arena summaries
- streak: Cross-domain active days and streaks
- completion: Per-domain and overall completion percentages
- aggregator: Orchestration and the ProgressAggregator service
- achievements: Badges earned from a snapshot
- history: Daily activity for the journey heatmap

Usage:
    from journey.services.progress import ProgressAggregator, aggregate_progress
"""

from journey.services.progress.aggregator import (
    ProgressAggregator,
    aggregate_progress,
    aggregate_raw_collections,
)
from journey.services.progress.achievements import get_achievements
from journey.services.progress.history import build_activity_history
from journey.services.progress.loader import load_domain_records, parse_domain_records

__all__ = [
    "ProgressAggregator",
    "aggregate_progress",
    "aggregate_raw_collections",
    "build_activity_history",
    "get_achievements",
    "load_domain_records",
    "parse_domain_records",
]
