"""
Miscellaneous things not depending on anything else from sklearn_hasse:
reading records and reading/writing covering edges as text.

Record format: one record per line, elements separated by a single space,
each an unsigned 32 bit integer, e.g. ``1 2 5``.

Edge format: one edge per line, ``<subset>-><superset>`` with the elements of
each side joined by `EDGE_DELIMITER`, e.g. ``1, 2->1, 2, 5``.
"""

import os
import re
from contextlib import nullcontext
from typing import IO, Iterable, Iterator, List, Sequence, Tuple, Union

RECORD_SEPARATOR = ' '
EDGE_DELIMITER = ', '
EDGE_ARROW = '->'
ELEMENT_MAX = 2 ** 32 - 1

PathOrFile = Union[str, os.PathLike, IO[str]]

_ELEMENT_PATTERN = re.compile(r'\+?[0-9]+')


class RecordParseError(ValueError):
    """A record token could not be interpreted as an element.

    Attributes
    -----
    line_no : int
        1-based line number of the offending record.

    record : str
        The offending record, as read.
    """

    def __init__(self, line_no: int, record: str, reason: str):
        super().__init__("Unable to read record on line %d (%r): %s"
                         % (line_no, record, reason))
        self.line_no = line_no
        self.record = record


def parse_element(token: str) -> int:
    """:return: `token` as element, i.e. an integer in `[0, ELEMENT_MAX]`.
    :raise ValueError: if `token` is not such an integer, written in ASCII
        digits only.
    """
    if not _ELEMENT_PATTERN.fullmatch(token):
        raise ValueError("invalid element %r" % token)
    element = int(token)
    if not 0 <= element <= ELEMENT_MAX:
        raise ValueError("element %d out of range [0, %d]"
                         % (element, ELEMENT_MAX))
    return element


def parse_record(line: str, line_no: int = 1,
                 separator: str = RECORD_SEPARATOR) -> Tuple[int, ...]:
    """:return: The elements of one record line, in their original order.
    :raise RecordParseError: naming `line_no`, if any token is invalid.
    """
    try:
        return tuple(parse_element(token) for token in line.split(separator))
    except ValueError as e:
        raise RecordParseError(line_no, line, str(e)) from e


def _open(path_or_file: PathOrFile, mode: str):
    if hasattr(path_or_file, 'read' if 'r' in mode else 'write'):
        # caller owned, not closed
        return nullcontext(path_or_file)
    return open(path_or_file, mode, encoding='utf-8')


def read_records(path_or_file: PathOrFile) -> Iterator[Tuple[int, ...]]:
    """Parse every line of `path_or_file` with `parse_record`.

    A trailing newline at the end of input does not start a new record, but
    any other empty line is an error.
    """
    with _open(path_or_file, 'r') as file:
        for line_no, line in enumerate(file, start=1):
            yield parse_record(line.rstrip('\r\n'), line_no)


def _elements(side) -> Sequence:
    return getattr(side, 'elements', side)


def format_edge(edge, delimiter: str = EDGE_DELIMITER) -> str:
    """:return: `edge` as ``<subset>-><superset>``, without newline.

    :param edge: A pair `(subset, superset)`, each an `Itemset` or a sequence
        of elements.

    Elements are written with `str`. Only records of integer elements can be
    read back by `parse_edge`; other elements are written for display only,
    and are ambiguous if their text contains `delimiter` or `EDGE_ARROW`.
    """
    subset, superset = edge
    return '{}{}{}'.format(delimiter.join(str(e) for e in _elements(subset)),
                           EDGE_ARROW,
                           delimiter.join(str(e) for e in _elements(superset)))


def parse_edge(line: str, line_no: int = 1,
               delimiter: str = EDGE_DELIMITER
               ) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """Inverse of `format_edge`.

    :return: `(subset_elements, superset_elements)`.
    :raise RecordParseError: if `line` is not a valid edge.
    """
    sides = line.split(EDGE_ARROW)
    if len(sides) != 2:
        raise RecordParseError(line_no, line,
                               "expected exactly one %r" % EDGE_ARROW)
    subset, superset = (parse_record(side, line_no, delimiter)
                        for side in sides)
    return subset, superset


def export_edges(edges: Iterable, delimiter: str = EDGE_DELIMITER) -> str:
    """:return: All `edges` formatted, one per line."""
    return ''.join(format_edge(edge, delimiter) + '\n' for edge in edges)


def write_edges(edges: Iterable, path_or_file: PathOrFile,
                delimiter: str = EDGE_DELIMITER) -> None:
    """Write `edges` to `path_or_file`, see `format_edge`."""
    with _open(path_or_file, 'w') as file:
        file.write(export_edges(edges, delimiter))


def read_edges(path_or_file: PathOrFile, delimiter: str = EDGE_DELIMITER
               ) -> List[Tuple[Tuple[int, ...], Tuple[int, ...]]]:
    """Read edges written by `write_edges`."""
    with _open(path_or_file, 'r') as file:
        return [parse_edge(line.rstrip('\r\n'), line_no, delimiter)
                for line_no, line in enumerate(file, start=1)]
