"""Command Line Interface for the catalog ingestion pipeline.

Usage:
    python -m trailerhub populate [--seed N] [--target N]
"""

import argparse
import json
import random
import sys

from trailerhub.database import init_schema
from trailerhub.etl.pipeline.populate import populate_catalog
from trailerhub.etl.utils import setup_logger
from trailerhub.settings import settings

logger = setup_logger("etl.pipeline.cli")


# =============================================================================
# ARGUMENT PARSING
# =============================================================================


def _parse_cli_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(prog="trailerhub", description="TrailerHub catalog tools")
    commands = parser.add_subparsers(dest="command", required=True)

    populate = commands.add_parser("populate", help="Replace the catalog with fresh TMDB data")
    populate.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for demo tier and runtime assignment",
    )
    populate.add_argument(
        "--target",
        type=int,
        default=None,
        help=f"Movies to ingest (default: {settings.ingestion.target_count})",
    )
    populate.add_argument(
        "--init-schema",
        action="store_true",
        help="Create missing tables before ingesting",
    )

    return parser.parse_args(argv)


# =============================================================================
# COMMAND HANDLERS
# =============================================================================


def _handle_populate(args: argparse.Namespace) -> int:
    """Handle the populate command.

    Returns:
        Process exit code.
    """
    config = settings.ingestion
    if args.target is not None:
        config = config.model_copy(update={"target_count": args.target})

    seed = args.seed if args.seed is not None else config.seed

    if args.init_schema:
        init_schema()

    report = populate_catalog(config=config, rng=random.Random(seed))
    print(json.dumps(report.to_response(), indent=2))

    if not report.success:
        logger.error(f"Catalog refresh failed: {report.error}")
        return 1

    logger.info(report.message)
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    try:
        args = _parse_cli_arguments(argv)
        sys.exit(_handle_populate(args))
    except KeyboardInterrupt:
        logger.warning("Catalog refresh interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
