# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from atomic_change.config import configure_logging
from atomic_change.domain import ChangeBatch, atomic_change_to
from atomic_change.record import Record, age, name, position

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Apply name/age/position changes to a record, all or nothing"
    )
    parser.add_argument("--name", type=str, help="New name (rejected when empty)")
    parser.add_argument("--age", type=int, help="New age (rejected when negative)")
    parser.add_argument("--position", type=str, help="New position (always accepted)")
    parser.add_argument("--initial-name", type=str, help="Name the record starts with")
    parser.add_argument("--initial-age", type=int, help="Age the record starts with")
    parser.add_argument("--initial-position", type=str, help="Position the record starts with")
    return parser.parse_args(list(argv))


def _build_batch(
    name_value: str | None,
    age_value: int | None,
    position_value: str | None,
) -> ChangeBatch[Record]:
    batch = ChangeBatch[Record]()
    if name_value is not None:
        batch.add(name.to(name_value))
    if age_value is not None:
        batch.add(age.to(age_value))
    if position_value is not None:
        batch.add(position.to(position_value))
    return batch


def _initial_record(args: argparse.Namespace) -> Record:
    record = Record()
    seed = _build_batch(args.initial_name, args.initial_age, args.initial_position)
    outcome = atomic_change_to(record).apply_detailed(seed)
    if not outcome:
        raise ValueError(f"Invalid initial record: {outcome.reason}")
    return record


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        record = _initial_record(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    batch = _build_batch(parsed_args.name, parsed_args.age, parsed_args.position)
    outcome = atomic_change_to(record).apply_detailed(batch)
    if outcome:
        log.info("Committed %d change(s)", outcome.applied)
    else:
        log.info("Rejected change %s: %s", outcome.failed_index, outcome.reason)

    print(f"success = {outcome.committed}")
    print(record.dump())
    if not outcome:
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
