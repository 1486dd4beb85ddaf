"""marketplace-secret entrypoint for issuing and checking join passwords."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from marketplace_credentials.application.services.marketplace_password_service import (
    MarketplacePasswordService,
)
from marketplace_credentials.config.settings import load_settings
from marketplace_credentials.domain.marketplace.errors import DigestEnvironmentUnavailableError
from marketplace_credentials.domain.marketplace.password_secret import proof_matches
from marketplace_credentials.infrastructure.logging import configure_logging
from marketplace_credentials.infrastructure.security.runtime import (
    build_marketplace_password_service,
)

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ENVIRONMENT_UNAVAILABLE = 2
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the issue/prove subcommands."""

    parser = argparse.ArgumentParser(
        prog="marketplace-secret",
        description="Issue marketplace join-password credentials or compute join proofs.",
    )
    subcommands = parser.add_subparsers(dest="command", required=True)

    issue = subcommands.add_parser("issue", help="issue a new salt/hash credential")
    issue_password = issue.add_mutually_exclusive_group(required=True)
    issue_password.add_argument("--password")
    issue_password.add_argument(
        "--password-stdin",
        action="store_true",
        help="read the password from the first line of stdin",
    )

    prove = subcommands.add_parser("prove", help="compute the join proof for a stored salt")
    prove.add_argument("--salt", required=True)
    prove_password = prove.add_mutually_exclusive_group(required=True)
    prove_password.add_argument("--password")
    prove_password.add_argument("--password-stdin", action="store_true")
    prove.add_argument(
        "--expected-hash",
        help="stored hash to compare against; exit status 1 on mismatch",
    )
    return parser


def _read_password(args: argparse.Namespace, stdin: TextIO) -> str:
    if args.password_stdin:
        return stdin.readline().rstrip("\r\n")
    return str(args.password)


async def run_command(
    args: argparse.Namespace,
    *,
    service: MarketplacePasswordService,
    stdin: TextIO,
    stdout: TextIO,
) -> int:
    """Execute one parsed subcommand and return the process exit status."""

    password = _read_password(args, stdin)

    if args.command == "issue":
        secret = await service.create_password_secret(password)
        stdout.write(json.dumps(secret.to_record()) + "\n")
        return EXIT_OK

    proof = await service.compute_join_proof(password, args.salt)
    stdout.write(proof + "\n")
    if args.expected_hash is None:
        return EXIT_OK
    if proof_matches(proof=proof, password_hash=args.expected_hash):
        return EXIT_OK
    logger.info("join_proof_mismatch")
    return EXIT_MISMATCH


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Parse arguments, build the service, and run one subcommand."""

    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(level=settings.log_level)

    try:
        service = build_marketplace_password_service(settings)
    except DigestEnvironmentUnavailableError as error:
        logger.error("marketplace_secret_startup_failed error=%s", error)
        return EXIT_ENVIRONMENT_UNAVAILABLE

    return asyncio.run(
        run_command(
            args,
            service=service,
            stdin=stdin or sys.stdin,
            stdout=stdout or sys.stdout,
        )
    )


if __name__ == "__main__":
    raise SystemExit(main())
