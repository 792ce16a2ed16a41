from enum import Enum


class ErrorKind(str, Enum):
    """Expected failure a conformant implementation must report for a fixture."""

    BAD_PRIVATE = "BAD_PRIVATE"
    BAD_POINT = "BAD_POINT"
    BAD_SIGNATURE = "BAD_SIGNATURE"
    BAD_TWEAK = "BAD_TWEAK"


class GenerationError(Exception):
    pass


class ConsistencyError(GenerationError):
    """The trusted primitive library disagreed with itself or with an expectation.

    Never recorded as a fixture: it means the oracle is broken and the run
    has to stop before anything is written.
    """


def agree(context, actual, expected):
    if actual != expected:
        raise ConsistencyError(
            f"{context}: got {_show(actual)}, expected {_show(expected)}"
        )
    return actual


def _show(value):
    if value is None:
        return "infinity"
    if isinstance(value, bytes):
        return value.hex()
    return repr(value)
