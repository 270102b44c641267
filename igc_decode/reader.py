"""
Line-by-line reader for IGC files.

Feeds each line through ``igc_decode.detect.parse_line`` and applies
the configured failure policy per line:

- ``"raise"``:   re-raise the first failure, with ``line_no`` attached.
- ``"collect"``: keep the failure on ``FlightLog.failures`` and continue.
- ``"skip"``:    log a warning and continue.

Lines with unknown tags decode to ``Unrecognised`` and are kept unless
``keep_unrecognised`` is False.  Line terminators (``\\r\\n`` or
``\\n``) are stripped before decoding; nothing else is.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from igc_decode.config import OnError, ReaderConfig
from igc_decode.detect import parse_line
from igc_decode.exceptions import ParsingError
from igc_decode.flight_log import DecodedLine, FlightLog
from igc_decode.records import Unrecognised

logger = logging.getLogger(__name__)

_ON_ERROR = ("raise", "collect", "skip")


def iter_decoded(
    lines: Iterable[str],
    on_error: OnError = "collect",
) -> Iterator[DecodedLine | ParsingError]:
    """Decode *lines* lazily, yielding a ``DecodedLine`` or a ``ParsingError`` per line.

    Under ``"raise"`` the first failure is raised instead of yielded;
    under ``"skip"`` failures are logged and not yielded at all.
    """
    if on_error not in _ON_ERROR:
        raise ValueError(f"on_error must be one of {_ON_ERROR}, got {on_error!r}")

    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        try:
            record = parse_line(line)
        except ParsingError as exc:
            exc.line_no = line_no
            if on_error == "raise":
                raise
            logger.warning("%s", exc)
            if on_error == "collect":
                yield exc
            continue
        yield DecodedLine(line_no=line_no, record=record)


def decode_lines(
    lines: Iterable[str],
    config: ReaderConfig | None = None,
    source: str = "<memory>",
) -> FlightLog:
    """Decode an iterable of lines into a ``FlightLog``.

    Args:
        lines: Lines of an IGC file, with or without terminators.
        config: Reader settings; defaults to ``ReaderConfig()``.
        source: Label stored on the resulting log.

    Raises:
        ParsingError: Only when ``config.on_error == "raise"``.
    """
    config = config or ReaderConfig()
    log = FlightLog(source=source)

    for item in iter_decoded(lines, on_error=config.on_error):
        if isinstance(item, ParsingError):
            log.failures.append(item)
        elif isinstance(item.record, Unrecognised) and not config.keep_unrecognised:
            logger.debug("Dropping unrecognised line %d", item.line_no)
        else:
            log.lines.append(item)

    logger.info(
        "Decoded %s: %d records, %d failures, %d unrecognised",
        source,
        len(log.lines),
        len(log.failures),
        len(log.unrecognised),
    )
    return log


def read_log(path: str | Path, config: ReaderConfig | None = None) -> FlightLog:
    """Read and decode an IGC file from disk.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ParsingError: Only when ``config.on_error == "raise"``.
    """
    path = Path(path)
    config = config or ReaderConfig()
    logger.info("Reading IGC file %s", path)
    with open(path, "r", encoding=config.encoding, errors=config.encoding_errors, newline="") as f:
        return decode_lines(f, config=config, source=str(path))
