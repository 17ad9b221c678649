#!/usr/bin/env python3
"""Page maintenance commands.

    python manage_page.py get-started      # set the "Get Started" button
    python manage_page.py backfill-names   # fill in missing user names
"""
import argparse
import logging
import sys

from messenger_translator.application.use_cases.page_setup_use_case import GET_STARTED_PAYLOAD
from messenger_translator.config.settings import get_config
from messenger_translator.domain.exceptions import RelayError
from messenger_translator.infrastructure.service_container import ServiceContainer

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger("manage_page")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Messenger page maintenance")
    subparsers = parser.add_subparsers(dest="command", required=True)

    get_started = subparsers.add_parser("get-started", help="Configure the Get Started button")
    get_started.add_argument(
        "--payload",
        default=GET_STARTED_PAYLOAD,
        help=f"Postback payload of the button (default: {GET_STARTED_PAYLOAD})",
    )

    backfill = subparsers.add_parser("backfill-names", help="Fill in user names from Messenger profiles")
    backfill.add_argument(
        "--overwrite",
        action="store_true",
        help="Refresh names that are already stored",
    )

    args = parser.parse_args(argv)

    config = get_config()
    config.validate()
    container = ServiceContainer(config, cache_enabled=False)
    use_case = container.get_page_setup_use_case()

    try:
        if args.command == "get-started":
            if not use_case.configure_get_started(args.payload):
                logger.error("Failed to set the Get Started button")
                return 1
            return 0

        stats = use_case.backfill_names(overwrite=args.overwrite)
        return 1 if stats["failed"] else 0
    except RelayError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    finally:
        container.close()


if __name__ == "__main__":
    sys.exit(main())
