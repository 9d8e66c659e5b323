"""Entry point of the cache server."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def main(argv: Sequence[str] | None = None) -> int:
    """Start the server and report it on standard output."""
    parser = argparse.ArgumentParser(prog="cortexd", description="Cortex cache server.")
    parser.parse_args(argv)
    print("cortexd starting")
    return 0