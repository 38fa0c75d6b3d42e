"""Command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from amazons.menu_controller import MenuController
from amazons.text_display import TextDisplay

_HELP = (
    "King of the Amazons\n"
    "Usage: {prog} [options]\n"
    "Options:\n"
    "  --graphical, -g    Use pure graphical interface (default)\n"
    "  --text, -t         Use text interface\n"
    "  --help, -h         Show this help message\n"
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    graphical = True
    for arg in args:
        if arg in ("--graphical", "-g"):
            graphical = True
        elif arg in ("--text", "-t"):
            graphical = False
        elif arg in ("--help", "-h"):
            sys.stdout.write(_HELP.format(prog="amazons"))
            return 0
    try:
        if graphical:
            sys.stdout.write(
                "Graphical interface not available. Falling back to text interface.\n"
            )
        MenuController(TextDisplay()).run()
        return 0
    except Exception as exc:
        sys.stderr.write(f"Fatal error: {exc}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())