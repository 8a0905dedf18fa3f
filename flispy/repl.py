"""
Interactive read-evaluate-print loop and command line entry point.

Each line typed at the prompt is parsed, evaluated and printed on its own;
a line that fails to parse prints the syntax error and the loop carries on.
Line editing and history come from the readline module, and history is
persisted between sessions when a history file is configured.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from flispy import __version__
from flispy.config import (
    ENGINE_NAMES,
    get_history_file,
    get_history_length,
    get_log_level,
)
from flispy.errors import FlispyConfigError, FlispyDepthError, FlispySyntaxError
from flispy.interpreter import Interpreter
from flispy.logging_config import get_logger, setup_logging

try:
    import readline
except ImportError:  # not shipped on Windows: plain input(), no history
    readline = None

logger = get_logger(__name__)

BANNER = f"Flispy Version {__version__}\nPress Ctrl+c to exit\n"
PROMPT = "flispy> "


class Repl:
    def __init__(
        self,
        interpreter: Optional[Interpreter] = None,
        history_file: Optional[Path] = None,
        history_length: int = 1000,
        input_fn: Optional[Callable[[str], str]] = None,
        output: Optional[TextIO] = None,
    ):
        self.interp = interpreter if interpreter is not None else Interpreter()
        self.history_file = history_file
        self.history_length = history_length
        self.input_fn = input_fn if input_fn is not None else input
        self.output = output

    def _print(self, text: str) -> None:
        print(text, file=self.output if self.output is not None else sys.stdout)

    def load_history(self) -> None:
        if self.history_file is None or readline is None:
            return
        readline.set_history_length(self.history_length)
        try:
            readline.read_history_file(self.history_file)
        except FileNotFoundError:
            pass  # first session: nothing to load yet
        except OSError as e:
            logger.warning("Could not read history file %s: %s", self.history_file, e)

    def save_history(self) -> None:
        if self.history_file is None or readline is None:
            return
        try:
            readline.write_history_file(self.history_file)
        except OSError as e:
            logger.warning("Could not write history file %s: %s", self.history_file, e)

    def process(self, line: str) -> str:
        """Evaluate one line of input and return the text to print."""
        try:
            return self.interp.eval_to_text(line)
        except FlispySyntaxError as e:
            logger.info("Syntax error in %r", line)
            return str(e)
        except FlispyDepthError as e:
            logger.info("Nesting too deep in a line of %d characters", len(line))
            return f"flispy: {e}"

    def run(self) -> int:
        self._print(BANNER)
        self.load_history()
        try:
            while True:
                try:
                    line = self.input_fn(PROMPT)
                except (EOFError, KeyboardInterrupt):
                    self._print("")
                    break
                self._print(self.process(line))
        finally:
            self.save_history()
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flispy",
        description="Evaluate Flispy expressions interactively or from the command line.",
    )
    parser.add_argument(
        "-e", "--eval", dest="expressions", action="append", metavar="EXPR",
        help="evaluate EXPR, print the result and exit (may be repeated)",
    )
    parser.add_argument(
        "--engine", choices=ENGINE_NAMES,
        help="evaluator to use (default: $FLISPY_ENGINE or recursive)",
    )
    parser.add_argument(
        "--log-level", default=None,
        help="logging level (default: $FLISPY_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--log-file", default=None, help="write logs to this file instead of stderr")
    parser.add_argument(
        "--history-file", type=Path, default=None,
        help="REPL history file (default: $FLISPY_HISTORY_FILE or ~/.flispy_history)",
    )
    parser.add_argument("--no-history", action="store_true", help="do not load or save REPL history")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        setup_logging(args.log_level or get_log_level(), args.log_file)
        interp = Interpreter(engine=args.engine)

        if args.expressions:
            status = 0
            for expr in args.expressions:
                try:
                    print(interp.eval_to_text(expr))
                except FlispySyntaxError as e:
                    print(e, file=sys.stderr)
                    status = 1
                except FlispyDepthError as e:
                    print(f"flispy: {e}", file=sys.stderr)
                    status = 1
            return status

        if args.no_history:
            history_file = None
        else:
            history_file = args.history_file or get_history_file()
        return Repl(interp, history_file, get_history_length()).run()
    except FlispyConfigError as e:
        print(f"flispy: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
