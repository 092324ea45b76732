from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from inbox_sorter.config.settings import clamp_max_emails, configure_logging
from inbox_sorter.models import EmailRecord
from inbox_sorter.pipeline.batch import classify_batch
from inbox_sorter.sources.demo import generate_demo_emails


def load_emails(path: Path) -> List[EmailRecord]:
    data = json.loads(path.read_text(encoding="utf-8"))
    # Accept either a bare list or {"emails": [...]}.
    if isinstance(data, dict):
        data = data.get("emails") or []
    return [EmailRecord.from_dict(item) for item in data]


def main(argv: List[str] | None = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Classify emails as marketing or important and print the batch as JSON."
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--input",
        dest="input_path",
        type=Path,
        help="JSON file with a list of emails (id, from, subject, date, body).",
    )
    source.add_argument(
        "--demo",
        dest="demo_count",
        default=None,
        help="Classify N generated sample emails (default when no --input is given).",
    )
    parser.add_argument(
        "--auto-unsubscribe",
        dest="auto_unsubscribe",
        action="store_true",
        help="Mark marketing emails with an unsubscribe link as unsubscribed (simulated).",
    )
    parser.add_argument(
        "--workers",
        dest="workers",
        type=int,
        default=None,
        help="Classify with N worker threads.",
    )
    parser.add_argument(
        "--pretty",
        dest="pretty",
        action="store_true",
        help="Indent the JSON output.",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        help="Logging level (defaults to INBOX_SORTER_LOG_LEVEL).",
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        if args.input_path:
            emails = load_emails(args.input_path)
        else:
            emails = generate_demo_emails(clamp_max_emails(args.demo_count))
    except (OSError, ValueError, KeyError, TypeError) as exc:
        print(f"[ERROR] Could not load emails: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    batch = classify_batch(emails, args.auto_unsubscribe, max_workers=args.workers)
    print(json.dumps(batch.to_dict(), indent=2 if args.pretty else None, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
