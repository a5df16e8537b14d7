"""Seed the remote notes collection with sample notes.

Reads SUPABASE_URL / SUPABASE_KEY from the environment or .env and creates
each sample note through the repository.

Usage:
    python scripts/seed_notes.py [--dry-run]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import httpx  # noqa: E402

from notes_client.config import Settings  # noqa: E402
from notes_client.repository import NotesRepository  # noqa: E402

logger = logging.getLogger("seed_notes")

# Each entry: (title, content)
SAMPLE_NOTES: list[tuple[str, str]] = [
    ("Groceries", "milk, eggs, bread, coffee"),
    (
        "Project ideas",
        "Sync notes to a tablet. Markdown preview. Export everything as JSON.",
    ),
    ("Meeting notes", "Agreed to ship the editor first; list polish next week."),
    ("Reading list", "Designing Data-Intensive Applications, The Pragmatic Programmer"),
    ("Reminder", "Renew the API key before the end of the month."),
]


async def seed(repository: NotesRepository) -> int:
    """Create every sample note. Returns the number of failures."""
    failures = 0
    for i, (title, content) in enumerate(SAMPLE_NOTES, 1):
        try:
            ok = await repository.create(title, content)
        except httpx.HTTPError as e:
            logger.error("Creating '%s' failed: %s", title, e)
            ok = False
        status = "OK" if ok else "FAIL"
        print(f"  [{i}/{len(SAMPLE_NOTES)}] {status:4}  {title}")
        if not ok:
            failures += 1
    return failures


def main() -> None:
    """Parse arguments and seed the collection."""
    parser = argparse.ArgumentParser(description="Seed the notes collection")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the sample notes without sending them",
    )
    args = parser.parse_args()

    settings = Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )

    print(f"\n  Seeding {settings.collection_url}")
    print("  " + "=" * 58)

    if args.dry_run:
        for title, content in SAMPLE_NOTES:
            print(f"  {title}: {content}")
        return

    failures = asyncio.run(seed(NotesRepository(settings)))

    print("  " + "=" * 58)
    print(f"  Done! {len(SAMPLE_NOTES) - failures}/{len(SAMPLE_NOTES)} notes created.")
    if failures:
        print("  Check SUPABASE_URL / SUPABASE_KEY and the table permissions.")
        sys.exit(1)


if __name__ == "__main__":
    main()
