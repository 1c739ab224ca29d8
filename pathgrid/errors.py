# pathgrid/errors.py


class PathgridError(Exception):
    """Base class for errors raised by pathgrid."""


class InvalidConfiguration(PathgridError, ValueError):
    """Grid dimensions or endpoints cannot support a search run."""


class NoActiveRun(PathgridError, RuntimeError):
    """An operation needs a run that has not been started or has the wrong status."""
