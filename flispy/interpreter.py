from __future__ import annotations
from typing import Literal, Mapping, Optional

from flispy import EvaluatorFn
from flispy.builtin import BUILTINS, BuiltinFn
from flispy.config import get_engine
from flispy.errors import FlispyDepthError
from flispy.evaluation import get_evaluator
from flispy.logging_config import get_logger
from flispy.printer import render
from flispy.reader import parse, read
from flispy.types.symbol import Symbol
from flispy.types.value import Value

logger = get_logger(__name__)


class Interpreter:
    """
    Reads, evaluates and renders Flispy input one line at a time.
    Every call builds and retires its own value tree; nothing is shared
    between calls.
    """

    # Class-level default so tests can switch engines without env variables
    DefaultEngine: Literal['recursive', 'iterative'] = 'recursive'

    def __init__(
        self,
        engine: Literal['recursive', 'iterative'] | None = None,
        builtins: Optional[Mapping[Symbol, BuiltinFn]] = None,
    ):
        self.engine: str = engine or get_engine() or self.DefaultEngine
        self.eval_fn: EvaluatorFn = get_evaluator(self.engine)
        self.builtins: Mapping[Symbol, BuiltinFn] = BUILTINS if builtins is None else builtins
        logger.debug("Interpreter using the %s engine", self.engine)

    def read(self, code: str) -> Value:
        """Parse `code` and read the whole line as one s-expression."""
        return read(parse(code))

    def eval(self, code: str) -> Value:
        value = self.read(code)
        try:
            result = self.eval_fn(value, self.builtins)
        except RecursionError:
            raise FlispyDepthError(
                f"expression nested too deeply for the {self.engine} engine"
            ) from None
        logger.debug("Evaluated %r to %s", code, type(result).__name__)
        return result

    def eval_to_text(self, code: str) -> str:
        return render(self.eval(code))
