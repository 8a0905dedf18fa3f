class FlispyError(Exception):
    """ Base class for all Flispy errors"""
    pass

class FlispySyntaxError(FlispyError):
    """ Raised when the input text or a syntax tree cannot be read"""

class FlispyTypeError(FlispyError):
    """ Raised when a value is converted to a variant it cannot become"""

class FlispyIndexError(FlispyError):
    """ Raised when a list child is addressed outside its bounds"""

class FlispyConfigError(FlispyError):
    """ Raised when a configuration value is invalid"""

class FlispyDepthError(FlispyError):
    """ Raised when an expression is nested deeper than the engine can follow"""

# Evaluation failures are never raised: they travel as Error values
# (see flispy.types.value.ErrorKind).
