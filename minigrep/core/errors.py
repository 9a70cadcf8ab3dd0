"""
Errors raised by the core

Every failure a run can hit is a MinigrepError. Search itself never raises.
"""
from typing import Optional


class MinigrepError(Exception):
    """Base class for all minigrep failures"""


class MissingArgument(MinigrepError):
    """Query or filename was not supplied"""


class InvalidFlag(MinigrepError):
    """Third argument was something other than -i or -s"""

    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f"illegal argument: {flag!r} (expected -i or -s)")


class IoError(MinigrepError):
    """File could not be read as text"""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause

        if isinstance(cause, OSError) and cause.strerror:
            message = f"cannot read {path}: {cause.strerror}"
        elif cause is not None:
            message = f"cannot read {path}: {cause}"
        else:
            message = f"cannot read {path}"
        super().__init__(message)
