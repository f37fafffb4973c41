# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from doijournal.app import build_resolution_service
from doijournal.config import configure_logging
from doijournal.domain.resolution import JournalInvariantError, OutcomeStatus, ResolutionOutcome

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from doijournal.domain.resolution import JournalResolutionService

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve DOIs to journal records")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Find or create the journal for each DOI")
    resolve.add_argument("dois", nargs="+", metavar="DOI", help="DOI or doi.org URL")
    resolve.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )

    return parser.parse_args(list(argv))


def _render(outcome: ResolutionOutcome) -> str:
    document: dict[str, object] = {
        "doi": outcome.doi,
        "status": str(outcome.status),
        "http_status": outcome.http_status,
    }
    document.update(outcome.to_payload())
    return json.dumps(document)


def _resolve_one(service: JournalResolutionService, doi: str) -> ResolutionOutcome:
    try:
        return service.resolve(doi)
    except JournalInvariantError as exc:
        log.exception("Journal repository is inconsistent")
        return ResolutionOutcome.failure(
            OutcomeStatus.INTERNAL_INVARIANT_VIOLATION, doi, str(exc)
        )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
    load_dotenv()
    signal(SIGINT, sigint_handler)

    try:
        service = build_resolution_service()
    except Exception:
        log.exception("Could not start the resolver")
        sys.exit(1)

    all_resolved = True
    for doi in parsed_args.dois:
        outcome = _resolve_one(service, doi)
        all_resolved = all_resolved and outcome.ok
        print(_render(outcome))

    sys.exit(0 if all_resolved else 1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    main()
