"""
MIT License

Console entry-point for pfname.
"""

from __future__ import annotations

from .cli import build_parser, dispatch


def main() -> None:
    """Entry-point used by `python -m pfname` and console script."""
    parser = build_parser()
    args = parser.parse_args()
    dispatch(args)


if __name__ == "__main__":
    main()
