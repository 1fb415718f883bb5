"""
Errors raised while producing the penguin teaching fixtures.

Both are fatal: the pipeline has a single linear path, so the caller logs
the failed step and exits.
"""


class FixtureError(Exception):
    """Base class for fixture generation failures."""


class MissingFixture(FixtureError):
    """Reference table could not be obtained or lacks documented columns."""


class WriteFailure(FixtureError):
    """An output artifact could not be written."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write {path}: {reason}")
