#!/usr/bin/env python3

import sys
from collections.abc import Sequence

from .cli import main as cli_main


def main(argv: Sequence[str] | None = None) -> int:
    return int(cli_main(argv))


if __name__ == "__main__":
    sys.exit(main())
