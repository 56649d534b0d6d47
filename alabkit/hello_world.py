"""Minimal greeting command."""

from __future__ import annotations

import argparse


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="hello_world")
    parser.add_argument(
        "--workspace",
        action="store_true",
        help="print the workspace greeting instead",
    )
    args = parser.parse_args(argv)
    print("Hello, world!" if args.workspace else "hello_world")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())