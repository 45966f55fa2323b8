"""
Exception Types
===============
Errors raised by the section model.

Validation verdicts (Invalid / Intermediate) are not errors; they are the
normal way in-progress keystrokes get rejected or provisionally accepted.
"""


class MultiSpinBoxError(Exception):
    """Base class for all errors raised by this package."""


class PreconditionError(MultiSpinBoxError, ValueError):
    """The integrator called the model with arguments it can never accept.

    Raised before any state is touched (bad index, missing section, malformed
    section bounds, reserved characters, empty inner suffix).
    """


class ConsistencyError(MultiSpinBoxError, RuntimeError):
    """The live text no longer splits into the registered sections."""
