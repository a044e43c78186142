"""CLI entrypoint that runs every drill."""

import argparse
import logging
from typing import List, Optional

from .drills import run_drills


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="branch-drills",
        description="Print the result of each conditional drill in both styles.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log each evaluation to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )
    run_drills()


if __name__ == "__main__":
    main()
