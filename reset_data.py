#!/usr/bin/env python3
"""
Reseed the trailer rental data files without starting the API.

Writes the default trailers, the demo booking and the demo
notifications into ``<content-root>/<DATA_DIR>/``.  Existing files
are overwritten.

Usage:
    python reset_data.py --content-root ./ --only bookings

If --content-root is omitted, the CONTENT_ROOT setting is used.
Repeat --only to reset several collections; without it all three
are reset.
"""

import argparse
import asyncio
import sys

from trailer_rental_api.app.core.config import settings
from trailer_rental_api.app.core.exceptions import StorageError
from trailer_rental_api.app.core.logging_config import setup_logging
from trailer_rental_api.app.core.storage import clear_collections, get_data_dir
from trailer_rental_api.app.services.booking_service import BookingService
from trailer_rental_api.app.services.notification_service import NotificationService
from trailer_rental_api.app.services.trailer_service import TrailerService

SERVICES = {
    "trailers": TrailerService,
    "bookings": BookingService,
    "notifications": NotificationService,
}


async def reset(names):
    counts = {}
    for name in names:
        records = await SERVICES[name].reset_data()
        counts[name] = len(records)
    return counts


def main(argv=None):
    ap = argparse.ArgumentParser(description="Reset trailer rental data files to the demo data set.")
    ap.add_argument("--content-root", help="Directory containing the data folder (default: CONTENT_ROOT)")
    ap.add_argument(
        "--only",
        action="append",
        choices=sorted(SERVICES),
        help="Collection to reset; may be repeated. Defaults to all.",
    )
    args = ap.parse_args(argv)

    setup_logging(settings.log_level)
    if args.content_root:
        settings.content_root = args.content_root
        clear_collections()

    names = args.only or list(SERVICES)
    # Strict mode so a failed write is reported instead of ignored.
    settings.strict_storage = True
    try:
        counts = asyncio.run(reset(names))
    except StorageError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 1

    data_dir = get_data_dir()
    for name, count in counts.items():
        print(f"[+] {name}: {count} records written to {data_dir / (name + '.json')}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
