"""Errors raised by the metro file adapter."""


class MetroError(Exception):
    """Base class for metro task failures reported to the user."""


class UnexpectedFileFormatError(MetroError):
    """The metro scheme file does not follow the expected layout."""


class FileLoadingError(MetroError):
    """The metro scheme file could not be read."""


class FileSavingError(MetroError):
    """The result file could not be written."""


class GraphServiceError(MetroError):
    """The graph service reported a failure."""
