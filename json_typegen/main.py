"""Entry point for the json-typegen console script."""

import sys
from typing import List, Optional

from .cli import create_parser, run
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, configure logging and run the command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)
    logger.debug("Arguments: %s", args)

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
