"""Command line lookup: ``python -m app.cli [CEP]``."""
import argparse
import asyncio
import logging
import sys

from app.core.config import settings
from app.core.models.exceptions import CEPTimeoutError
from app.core.services import get_faster_api_result

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Resolve a CEP using the fastest provider.")
    parser.add_argument("cep", nargs="?", default=settings.DEFAULT_CEP)
    return parser


def main(argv=None) -> int:
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    args = build_parser().parse_args(argv)

    try:
        result = asyncio.run(get_faster_api_result(args.cep, settings.CEP_LOOKUP_TIMEOUT))
    except CEPTimeoutError as e:
        print(f"Error: {e.message}")
        return 0

    address = result.address
    print(f"API: {result.provider}")
    print(f"CEP: {address.postal_code}")
    print(f"Street: {address.street}")
    print(f"Neighborhood: {address.neighborhood}")
    print(f"City: {address.city}")
    print(f"State: {address.state_code}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
