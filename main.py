from __future__ import annotations

import argparse
import logging
import sys

from checkers.game import Game
from ui.console import ConsoleIO


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Play two-player checkers in the terminal.")
	parser.add_argument(
		"--log-level",
		default="warning",
		choices=["debug", "info", "warning", "error"],
		help="Diagnostic log level (logs go to stderr).",
	)
	return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
	args = parse_args(argv)
	logging.basicConfig(
		level=getattr(logging, args.log_level.upper()),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
		stream=sys.stderr,
	)

	console = ConsoleIO()
	game = Game(read_line=console.read_line, write=console.write)
	try:
		game.start()
	except (EOFError, KeyboardInterrupt):
		console.write("\nGame aborted.")
		return 1
	return 0


if __name__ == "__main__":
	sys.exit(main())
