"""Engine error taxonomy.

Business outcomes (a failed compliance check, a high-risk ETA, a temperature
breach) are returned as data. These exceptions cover the cases where the
engine cannot produce an outcome at all.
"""


class EngineError(Exception):
    """Base class for errors reported back to the caller."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(EngineError):
    """A tracking number, invoice, carrier or alert could not be resolved."""

    status_code = 404


class ValidationFailure(EngineError):
    """Input rejected before any computation ran. The caller should re-prompt."""

    status_code = 422
