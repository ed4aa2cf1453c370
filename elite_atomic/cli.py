import argparse
import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from elite_atomic.api import DEFAULT_TIMEOUT, LichessClient, tournament_url
from elite_atomic.credentials import read_token
from elite_atomic.errors import CredentialReadError, EliteAtomicError
from elite_atomic.schedule import next_occurrence, now
from elite_atomic.schemas import TournamentRequest
from elite_atomic.tournament import build_elite_atomic

logger = logging.getLogger("elite_atomic.cli")


def parse_args(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Create the next weekly Elite Atomic arena on lichess.org"
    )

    parser.add_argument(
        "token_file",
        nargs="?",
        type=Path,
        help="File containing a lichess API token. Prompts on stdin if omitted.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="HTTP timeout in seconds",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the request that would be sent without contacting lichess",
    )

    return parser.parse_args(argv)


def next_tournament(clock: Callable[[], datetime] = now) -> TournamentRequest:
    """Build the request for the next Elite Atomic after the clock's current time."""
    current = clock()
    start = next_occurrence(current)
    logger.info("Next Elite Atomic after %s is %s", current.isoformat(), start.isoformat())

    return build_elite_atomic(start)


def run(client: LichessClient, clock: Callable[[], datetime] = now) -> str:
    """
    Create the next Elite Atomic through `client`.

    :return: ID of the created tournament
    """
    request = next_tournament(clock)

    return client.create_tournament(request)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for creating the next Elite Atomic."""

    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.dry_run:
        request = next_tournament()
        for key, value in request.to_form().items():
            print(f"{key}={value}")
        return 0

    try:
        token = read_token(args.token_file)
    except CredentialReadError as e:
        logger.error("%s", e)
        return 1

    try:
        tournament_id = run(LichessClient(token, timeout=args.timeout))
    except EliteAtomicError as e:
        logger.error("Error while creating tournament: %s", e)
        return 1

    print(f"Tournament created! {tournament_url(tournament_id)}")

    return 0
