"""Metro scheme text files in, closing sequence files out.

Input layout (station numbers are 1-based)::

    <station count> <line count>
    <station a> <station b>
    ...

Blank lines before the header and between lines are skipped. The scheme is
converted to graph XML with 0-based vertex indices for the graph service.
"""

import logging
import re
from collections.abc import Iterator
from pathlib import Path

from metrograph.codec.xml import edges_to_xml
from metrograph.config.settings import InputConfig, OutputConfig
from metrograph.metro.errors import (
    FileLoadingError,
    FileSavingError,
    UnexpectedFileFormatError,
)

log = logging.getLogger(__name__)

_UNSIGNED = re.compile(r"[0-9]+")


def _unexpected(description: str) -> UnexpectedFileFormatError:
    return UnexpectedFileFormatError(
        f"The input file has an unexpected format: {description}"
    )


def _parse_unsigned(name: str, value: str) -> int:
    if not _UNSIGNED.fullmatch(value):
        raise _unexpected(f"the {name} value ({value}) is not an unsigned integer")
    return int(value)


def _split_pair(items: list[str], what: str) -> tuple[str, str]:
    if len(items) == 1:
        raise _unexpected(f"{what} contains only one parameter instead of two")
    if len(items) > 2:
        raise _unexpected(f"{what} contains more than two parameters")
    return items[0], items[1]


def parse_metro_text(text: str, config: InputConfig | None = None) -> str:
    """Convert metro scheme text to graph XML.

    Args:
        text: Contents of a metro scheme file.
        config: Input limits; defaults to InputConfig().

    Returns:
        Graph XML with one vertex per station (station n -> vertex n - 1).

    Raises:
        UnexpectedFileFormatError: If the text breaks the layout rules.
    """
    config = config if config is not None else InputConfig()
    lines: Iterator[str] = iter(text.splitlines())

    blank_lines = 0
    header: list[str] = []
    for line in lines:
        header = line.split()
        if header:
            break
        blank_lines += 1
        if blank_lines > config.max_blank_lines_before_header:
            raise _unexpected("the file header is empty")
    else:
        raise _unexpected("the file is empty")

    if blank_lines:
        log.warning("Skipped %d blank line(s) before the header", blank_lines)

    count_text, lines_text = _split_pair(header, "the file header")
    station_count = _parse_unsigned("station count", count_text)
    if station_count < 1:
        raise _unexpected("the metro must contain at least one station")
    if station_count > config.max_stations:
        raise _unexpected(
            f"a metro must not contain more than {config.max_stations} stations"
        )

    line_count = _parse_unsigned("line count", lines_text)
    max_line_count = station_count * (station_count - 1) // 2
    if line_count > max_line_count:
        raise _unexpected(
            f"a metro with {station_count} stations cannot contain more than "
            f"{max_line_count} lines"
        )

    edges: list[tuple[int, int]] = []
    for line in lines:
        if len(edges) == line_count:
            break
        items = line.split()
        if not items:
            continue

        number = len(edges) + 1
        first_text, second_text = _split_pair(
            items, f"the metro line {number} description"
        )
        first = _parse_unsigned(f"first station of line {number}", first_text)
        second = _parse_unsigned(f"second station of line {number}", second_text)
        if first == second:
            raise _unexpected(
                f"the metro line {number} cannot connect a station with itself"
            )
        if first == 0 or second == 0:
            raise _unexpected(
                f"a metro station cannot have the number zero (line {number})"
            )
        if first > station_count or second > station_count:
            raise _unexpected(
                "a metro station cannot have a number greater than the "
                f"station count (line {number})"
            )
        edges.append((first - 1, second - 1))

    if len(edges) < line_count:
        raise _unexpected(
            f"unexpected end of file: only {len(edges)} metro lines read "
            f"instead of {line_count}"
        )

    log.debug("Parsed metro scheme: %d stations, %d lines", station_count, line_count)
    return edges_to_xml(station_count, edges)


def load_metro_xml(path: str | Path, config: InputConfig | None = None) -> str:
    """Read a metro scheme file and convert it to graph XML.

    The file is decoded with config.encoding; the default skips a leading
    UTF-8 byte order mark.

    Raises:
        FileLoadingError: If the file cannot be read or decoded.
        UnexpectedFileFormatError: If its contents break the layout rules.
    """
    config = config if config is not None else InputConfig()
    path = Path(path)
    try:
        text = path.read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise FileLoadingError(f"Could not load the file '{path}': {e}") from e

    log.info("Loaded metro scheme from %s", path)
    return parse_metro_text(text, config)


def format_sequence(sequence: list[int], config: OutputConfig | None = None) -> str:
    """One station number per line, shifted by config.station_base."""
    config = config if config is not None else OutputConfig()
    return "".join(f"{vertex + config.station_base}\n" for vertex in sequence)


def save_sequence(
    path: str | Path, sequence: list[int], config: OutputConfig | None = None
) -> Path:
    """Write a closing sequence file, overwriting any existing file.

    Raises:
        FileSavingError: If the file cannot be written.
    """
    config = config if config is not None else OutputConfig()
    path = Path(path)
    try:
        path.write_text(format_sequence(sequence, config), encoding=config.encoding)
    except OSError as e:
        raise FileSavingError(f"Could not save the file '{path}': {e}") from e

    log.info("Closing sequence written to %s", path)
    return path
