"""Metro scheme files and the station closing task."""

from metrograph.metro.errors import (
    FileLoadingError,
    FileSavingError,
    GraphServiceError,
    MetroError,
    UnexpectedFileFormatError,
)
from metrograph.metro.loader import (
    format_sequence,
    load_metro_xml,
    parse_metro_text,
    save_sequence,
)
from metrograph.metro.tasks import MetroTask, TaskCode

__all__ = [
    "FileLoadingError",
    "FileSavingError",
    "GraphServiceError",
    "MetroError",
    "MetroTask",
    "TaskCode",
    "UnexpectedFileFormatError",
    "format_sequence",
    "load_metro_xml",
    "parse_metro_text",
    "save_sequence",
]
