#!/usr/bin/env python3
"""
Journey Progress Report

Inspect journey progress and run vocabulary reviews from the command line,
over either a client-state export file or the Redis mirror.

Usage:
    # Progress snapshot
    python scripts/progress_report.py snapshot --export state.json
    python scripts/progress_report.py snapshot --redis --format json

    # Achievements and heatmap data
    python scripts/progress_report.py achievements --export state.json
    python scripts/progress_report.py history --export state.json --weeks 12

    # Vocabulary reviews
    python scripts/progress_report.py due --export state.json
    python scripts/progress_report.py review <word_id> --export state.json
    python scripts/progress_report.py master <word_id> --export state.json

    # Evaluate as of a fixed day
    python scripts/progress_report.py snapshot --export state.json --today 2026-10-17

review and master write the updated word back: into the export file with
--export, or into Redis with --redis.

Environment Variables (set in .env or environment):
    - TIMEZONE: Zone calendar days are evaluated in (default: UTC)
    - REDIS_URL: Redis connection string (with --redis)
    - DEBUG: Enable verbose logging
"""

import argparse
import asyncio
import json
import logging
import sys

from _common import add_common_args, open_store, parse_day, save_export

from journey.config import settings
from journey.db.redis import close_redis_pool
from journey.errors import WordNotFoundError
from journey.models.progress import JourneyProgress
from journey.models.records import VocabularyWord
from journey.services.progress import ProgressAggregator
from journey.services.vocabulary import StoreWordRepository, VocabularyReviewService


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


# =============================================================================
# Formatting
# =============================================================================


def format_snapshot(progress: JourneyProgress) -> str:
    """Format a progress snapshot for terminal output."""
    journal = progress.journal_progress
    books = progress.books_progress
    tasks = progress.tasks_progress
    vocab = progress.vocabulary_progress
    arenas = progress.life_arenas_progress
    completion = progress.completion

    lines = [
        "=" * 60,
        f"🧭 JOURNEY PROGRESS: {progress.overall_completion}% complete",
        "=" * 60,
        f"Started: {progress.start_date}   Last active: {progress.last_activity_date}",
        f"Days active: {progress.days_active}",
        f"🔥 Streak: {progress.current_streak} (best {progress.longest_streak})"
        + (f", next milestone {progress.next_streak_milestone}" if progress.next_streak_milestone else ""),
        "",
        f"📝 Journal     {completion.journal:5.1f}%  "
        f"{journal.pages_written}/{journal.target_pages} pages, {journal.entries_count} entries",
        f"📖 Reading     {completion.books:5.1f}%  "
        f"{books.chapters_completed}/{books.total_chapters} chapters, "
        f"{books.completed_books}/{books.total_books} books",
        f"⚡ Tasks       {completion.tasks:5.1f}%  "
        f"{tasks.completed_tasks}/{tasks.total_tasks} completed, {tasks.in_progress_tasks} in progress",
        f"📚 Vocabulary  {completion.vocabulary:5.1f}%  "
        f"{vocab.total_words} words, {vocab.words_mastered} mastered",
        f"🌱 Life arenas {completion.arenas:5.1f}%  "
        f"score {arenas.overall_score}/10, {arenas.completed_milestones} milestones",
    ]
    if books.current_book_id:
        lines.append(f"\nCurrently reading: {books.current_book_id}")
    return "\n".join(lines)


def format_word(word: VocabularyWord) -> str:
    return (
        f"{word.id}: {word.word or '(no word)'} "
        f"[{word.mastery_level.value}, {word.review_count} reviews, "
        f"next {word.next_review_date or 'unscheduled'}]"
    )


# =============================================================================
# Commands
# =============================================================================


async def show_snapshot(args: argparse.Namespace) -> None:
    aggregator = ProgressAggregator(open_store(args))
    progress = await aggregator.get_progress(parse_day(args.today))

    if args.format == "json":
        _print_json(progress.to_payload())
    else:
        print(format_snapshot(progress))


async def show_achievements(args: argparse.Namespace) -> None:
    aggregator = ProgressAggregator(open_store(args))
    achievements = await aggregator.get_achievements(parse_day(args.today))

    if args.format == "json":
        _print_json([a.to_payload() for a in achievements])
        return

    if not achievements:
        print("📭 No achievements yet")
        return
    for achievement in achievements:
        print(f"{achievement.icon} {achievement.title}: {achievement.description}")
        if achievement.date_earned:
            print(f"   Earned: {achievement.date_earned}")


async def show_history(args: argparse.Namespace) -> None:
    aggregator = ProgressAggregator(open_store(args))
    history = await aggregator.get_activity_history(
        weeks=args.weeks, today=parse_day(args.today)
    )

    if args.format == "json":
        _print_json(history.to_payload())
        return

    print(f"📅 {history.total_active_days} active days, {history.total_events} events")
    for day in history.days:
        bar = "█" * day.level
        domains = ", ".join(d.value for d in day.domains)
        print(f"  {day.date}  {bar:<4}  {day.count:3d}  {domains}")


async def show_due(args: argparse.Namespace) -> None:
    service = VocabularyReviewService(StoreWordRepository(open_store(args)))
    due = await service.get_words_due(parse_day(args.today))

    if args.format == "json":
        _print_json([w.to_storage() for w in due])
        return

    if not due:
        print("✅ No words due for review")
        return
    print(f"📚 {len(due)} word(s) due for review")
    for word in due:
        print(f"  {format_word(word)}")


async def apply_review(args: argparse.Namespace) -> None:
    store = open_store(args)
    service = VocabularyReviewService(StoreWordRepository(store))
    today = parse_day(args.today)

    try:
        if args.command == "master":
            word = await service.mark_mastered(args.word_id, today)
        else:
            word = await service.mark_reviewed(args.word_id, today)
    except WordNotFoundError as e:
        print(f"❌ {e.message}")
        sys.exit(1)

    if args.export:
        save_export(args.export, store.export())

    if args.format == "json":
        _print_json(word.to_storage())
    else:
        print(f"✅ {format_word(word)}")


# =============================================================================
# CLI Setup
# =============================================================================


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        description="Journey progress and vocabulary review tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    add_common_args(subparsers.add_parser("snapshot", help="Show the progress snapshot"))
    add_common_args(subparsers.add_parser("achievements", help="List earned achievements"))

    history_parser = subparsers.add_parser("history", help="Show daily activity")
    history_parser.add_argument(
        "--weeks",
        type=int,
        default=52,
        help="Number of trailing weeks (default: 52)",
    )
    add_common_args(history_parser)

    add_common_args(subparsers.add_parser("due", help="List words due for review"))

    review_parser = subparsers.add_parser("review", help="Record a word review")
    review_parser.add_argument("word_id", help="Library word id")
    add_common_args(review_parser)

    master_parser = subparsers.add_parser("master", help="Mark a word as mastered")
    master_parser.add_argument("word_id", help="Library word id")
    add_common_args(master_parser)

    return parser


COMMANDS = {
    "snapshot": show_snapshot,
    "achievements": show_achievements,
    "history": show_history,
    "due": show_due,
    "review": apply_review,
    "master": apply_review,
}


async def main() -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(args.debug or settings.DEBUG)

    try:
        await COMMANDS[args.command](args)
    finally:
        if args.redis:
            await close_redis_pool()


if __name__ == "__main__":
    asyncio.run(main())
