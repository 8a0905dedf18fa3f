# Core type aliases for Flispy.
# Runtime values are the slotted classes in flispy.types (Number, Error, Symbol,
# Sexpr, Qexpr). The aliases below are kept here so that builtins and the
# evaluators can annotate callables without importing each other.

from typing import Any, Callable

__version__ = "0.0.0.1"

# Evaluator function type: re-enters evaluation (used by the eval builtin)
EvaluatorFn = Callable[..., Any]
