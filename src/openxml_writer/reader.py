"""Tolerant streaming reader for package metadata parts.

The reader feeds a part to lxml's recovering pull parser and hands back the
elements found one level below the root. Malformed tokens are skipped and
logged; a stream that ends before the root's own end tag raises ReaderError
instead of producing a partial result.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, Union

from lxml import etree

from openxml_writer.errors import ReaderError, ReaderIssue, ReaderIssueType

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

XmlSource = Union[bytes, bytearray, IO[bytes]]

CHUNK_SIZE = 64 * 1024


def local_name(tag: object) -> str:
    """Return the local part of an element tag, tolerating recovered names."""
    if not isinstance(tag, str):
        return ""
    return tag.rpartition("}")[2]


def _failure(message: str, line: int | None = None, column: int | None = None) -> ReaderError:
    issue = ReaderIssue(
        issue_type=ReaderIssueType.READER_FAILURE,
        description=message,
        line=line,
        column=column,
    )
    return ReaderError(message, [issue])


def _iter_chunks(source: XmlSource) -> Iterator[bytes]:
    if isinstance(source, (bytes, bytearray)):
        if source:
            yield bytes(source)
        return
    while True:
        chunk = source.read(CHUNK_SIZE)
        if not chunk:
            return
        yield chunk


def _log_recovered(parser: etree.XMLPullParser, label: str) -> None:
    for entry in parser.error_log:
        issue = ReaderIssue(
            issue_type=ReaderIssueType.MALFORMED_INPUT,
            description=f"{label}: {entry.message}",
            line=entry.line,
            column=entry.column,
        )
        logger.warning("Recovered from malformed input: %s", issue)


def iter_top_level_elements(source: XmlSource, part_name: str = "") -> Iterator[etree._Element]:
    """Yield each element whose start tag sits directly below the root.

    Elements are yielded on their start event, so only the tag and attributes
    are guaranteed to be populated.

    The root counts as closed only when its end tag arrives while input is
    still being fed. End events the recovering parser makes up when the
    input runs out mean the stream was cut short.

    Args:
        source: Raw part bytes or a binary stream supplied by the caller.
        part_name: Used in log records and error messages only.

    Raises:
        ReaderError: If the stream cannot be read, holds no root element, or
            ends before the root element is closed.
    """
    label = part_name or "part"
    parser = etree.XMLPullParser(events=("start", "end"), recover=True)
    depth = 0
    seen_root = False
    root_closed = False

    try:
        for chunk in _iter_chunks(source):
            parser.feed(chunk)
            for event, element in parser.read_events():
                if root_closed:
                    continue
                if event == "start":
                    if depth == 1:
                        yield element
                    depth += 1
                    seen_root = True
                else:
                    depth -= 1
                    if depth == 0:
                        root_closed = True
        parser.close()
    except etree.XMLSyntaxError as exc:
        line, column = exc.position if exc.position else (None, None)
        raise _failure(f"Cannot parse {label}: {exc}", line, column) from exc
    except etree.LxmlError as exc:
        raise _failure(f"Cannot parse {label}: {exc}") from exc
    except OSError as exc:
        raise _failure(f"Cannot read {label}: {exc}") from exc
    finally:
        _log_recovered(parser, label)

    if not seen_root:
        raise _failure(f"{label} has no root element")
    if not root_closed:
        raise _failure(f"{label} ends before its root element is closed")
