#!/usr/bin/env python3
"""
Extract checklist tasks with 📅 deadlines and ✅ completion stamps to JSON.

Usage:
    python3 scripts/extract_tasks.py [--input PATH] [--output PATH] [--dry-run]

Configuration via environment variables:
- CHECKLIST_INPUT_FILE: Markdown document to read (default: data/tasks.md)
- CHECKLIST_OUTPUT_FILE: JSON file to write (default: tasks.json)
"""

import argparse
import logging
import os
import sys
import tempfile
from pathlib import Path

# Add lib directory to path for imports
_SCRIPT_DIR = Path(__file__).parent.resolve()
if str(_SCRIPT_DIR / "lib") not in sys.path:
    sys.path.insert(0, str(_SCRIPT_DIR / "lib"))

from checklist.extractor import extract_tasks
from checklist.models import tasks_to_json

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

# Default paths (overridable via env)
INPUT_FILE = Path(os.getenv("CHECKLIST_INPUT_FILE", "data/tasks.md")).expanduser()
OUTPUT_FILE = Path(os.getenv("CHECKLIST_OUTPUT_FILE", "tasks.json")).expanduser()


def _fail(message: str) -> None:
    print(f"❌ {message}", file=sys.stderr)
    sys.exit(1)


def read_document(path: Path) -> str:
    """Read the whole markdown document; exits on failure."""
    if not path.exists():
        _fail(f"Input document not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Failed to read {path}: {e}")


def write_json(path: Path, content: str) -> Path:
    """Atomically write JSON output to file."""
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(content)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
    finally:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)

    return path


def main(argv=None):
    parser = argparse.ArgumentParser(description="Extract checklist tasks from markdown to JSON")
    parser.add_argument("--input", type=Path, default=INPUT_FILE, help=f"Markdown file (default: {INPUT_FILE})")
    parser.add_argument("--output", type=Path, default=OUTPUT_FILE, help=f"JSON file (default: {OUTPUT_FILE})")
    parser.add_argument("--dry-run", action="store_true", help="Print JSON to stdout instead of writing")
    args = parser.parse_args(argv)

    content = read_document(args.input)
    tasks = extract_tasks(content)
    payload = tasks_to_json(tasks)

    if args.dry_run:
        print(payload)
        return

    # Diagnostic dump, one task per line
    for task in tasks:
        print(repr(task))

    try:
        written_path = write_json(args.output, payload)
    except OSError as e:
        _fail(f"Failed to write {args.output}: {e}")
    logger.info(f"Wrote {len(tasks)} tasks to {written_path}")


if __name__ == "__main__":
    main()
