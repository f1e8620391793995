import inspect
import threading

from tblib import pickling_support


class EvaluationError(Exception):
    """Raised when evaluating an element fails."""


# tracebacks of wrapped failures survive pickling
pickling_support.install(EvaluationError)


# Settings --------------------------------------------------------------------

def seterr(evaluation=None):
    """Set how errors are handled.

    Args:
        evaluation (str): how errors from user functions triggered
            during the evaluation of a stream are propagated:

            - `'passthrough'`: let the error propagate unchanged to the
              caller of the terminal operation (default).
            - `'wrap'`: raise :class:`EvaluationError` with original
              error as its cause and the location where the failing
              stage was created in the message.
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

    return "passthrough" if error_config.passthrough else 'wrap'


class ErrorConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.passthrough = True


error_config = ErrorConfig()


# Helpers ---------------------------------------------------------------------

def unindent(lines):
    if not lines:
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


def should_wrap(error):
    """Return wether a user error must be re-raised as EvaluationError."""
    return seterr() == 'wrap' and not isinstance(error, EvaluationError)


def evaluation_error(where, item, stack):
    return EvaluationError(
        "Failed to evaluate item {} in {} created at:\n{}".format(
            item, where, stack))
