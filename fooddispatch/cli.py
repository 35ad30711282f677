"""Command-line entry point for the delivery dispatcher."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .system import FoodDeliverySystem


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive dispatcher on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="fooddispatch",
        description="Interactive online food delivery order system.",
    )
    parser.parse_args(argv)
    FoodDeliverySystem(sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())