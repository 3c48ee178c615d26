import inspect
import threading

from tblib import pickling_support

from .utils import get_logger


logger = get_logger(__name__)


class EvaluationError(Exception):
    """Raised when a user function fails on an element, in 'wrap' mode."""


# Settings --------------------------------------------------------------------

def seterr(evaluation=None):
    """Set how errors are handled.

    Args:
        evaluation (str): how errors from user code called by SeqManip
            operations are propagated:

            - `'passthrough'`: let the original error propagate untouched
              (default).
            - `'wrap'`: raise :class:`EvaluationError` with the index of
              the failing element and the name of the operation, the
              original error is kept as its cause.
            - `None` leave unchanged and return current setting
    Returns:
        The setting value.
    """
    if evaluation == 'wrap':
        error_config.passthrough = False
    elif evaluation == 'passthrough':
        error_config.passthrough = True
    elif evaluation is not None:
        raise ValueError("evaluation must be 'wrap' or 'passthrough'")

    if evaluation is not None:
        logger.debug("error reporting set to %s", evaluation)

    return "passthrough" if error_config.passthrough else 'wrap'


class ErrorConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.passthrough = True


error_config = ErrorConfig()

# wrapped errors keep their traceback and cause when pickled
pickling_support.install(EvaluationError)


# Helpers ---------------------------------------------------------------------

def evaluate(owner, index, f, *args, stack=None):
    """Call `f(*args)` on behalf of operation `owner`.

    Failures are reported according to :func:`seterr`, `index` is the
    position of the element being processed and `stack` an optional
    description of where a deferred operation was created.
    """
    try:
        return f(*args)

    except Exception as error:
        if error_config.passthrough or isinstance(error, EvaluationError):
            raise

        msg = "Failed to evaluate item {} in {}".format(index, owner)
        if stack:
            msg += " created at:\n" + stack
        raise EvaluationError(msg) from error


def unindent(lines):
    if lines is None:
        return []

    prefix = lines[0]
    while len(prefix) > 0 and not prefix.isspace():
        prefix = prefix[:-1]

    for line in lines[1:]:
        while not line.startswith(prefix):
            prefix = prefix[:-1]

    return [line[len(prefix):] for line in lines]


def format_stack(skip=1):
    out = ""
    for frame in inspect.stack()[:skip:-1]:
        _, filename, lineno, function, code_context, _ = frame
        out += "  File \"{}\", line {}, in {}\n".format(
            filename, lineno, function)
        for line in unindent(code_context):
            out += "    " + line

    return out
