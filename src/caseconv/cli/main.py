"""Main CLI entry point for caseconv."""

import logging
import sys

from caseconv.cli import convert_cmd


def _usage() -> None:
    print("Usage: caseconv [--verbose] <command> [args...]", file=sys.stderr)
    print("Commands:", file=sys.stderr)
    print(
        "  convert [--style <name>] [--config <path>] <text...>  - Convert text to a case style",
        file=sys.stderr,
    )
    print("  styles                - List styles with an example each", file=sys.stderr)
    print("  demo                  - Run the usage examples", file=sys.stderr)


def main() -> None:
    """Main CLI entry point."""
    argv = sys.argv[1:]
    verbose = "--verbose" in argv
    argv = [a for a in argv if a != "--verbose"]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not argv:
        _usage()
        sys.exit(1)

    command = argv[0]
    if command == "convert":
        sys.exit(convert_cmd.run_convert_argv(argv[1:]))
    elif command == "styles":
        sys.exit(convert_cmd.run_styles())
    elif command == "demo":
        sys.exit(convert_cmd.run_demo())
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
