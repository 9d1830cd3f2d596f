"""
FASTA reader.

A FASTA stream is a series of records, each made of a name line
starting with '>' followed by any number of sequence lines:

    >name
    ACGT
    AAAA
    >name2
    AAGGTT

The reader pulls one record at a time from an open handle, keeping a
single line of lookahead between calls.
"""

import io
import logging
from dataclasses import dataclass
from typing import IO, Dict, Iterator, List, Union

from nucleo.errors import EndOfInput, FastaFormatError

logger = logging.getLogger(__name__)

NAME_MARKER = ">"


@dataclass
class FastaRecord:
    """
    Represents a single FASTA record.

    Attributes:
        name: Everything after '>' on the name line, trimmed
        sequence: The concatenated sequence lines
    """
    name: str
    sequence: str

    def __len__(self) -> int:
        return len(self.sequence)

    def __str__(self) -> str:
        return f"{NAME_MARKER}{self.name}\n{self.sequence}"

    def to_fasta(self, line_width: int = 60) -> str:
        """Format as FASTA string with wrapped sequence lines."""
        lines = [f"{NAME_MARKER}{self.name}"]
        for i in range(0, len(self.sequence), line_width):
            lines.append(self.sequence[i:i + line_width])
        return "\n".join(lines)


def is_name(line: str) -> bool:
    """Check whether a line is a name line."""
    return line.startswith(NAME_MARKER)


def get_name(line: str) -> str:
    """Extract the record name from a name line ('' if it is not one)."""
    if not is_name(line):
        return ""
    return line[len(NAME_MARKER):].strip()


def get_sequence(line: str) -> str:
    return line.strip()


class FastaReader:
    """
    Pull-based reader turning a text or binary handle into FastaRecords.

    The reader does not own the handle: it never opens or closes it.
    Instances are not thread-safe and should be driven by a single loop.

    Example:
        >>> reader = FastaReader(io.StringIO(">r1\\nACGT\\n"))
        >>> reader.read_next()
        FastaRecord(name='r1', sequence='ACGT')
    """

    def __init__(self, handle: IO, encoding: str = "utf-8"):
        self._handle = handle
        self._encoding = encoding
        # Most recently read line not yet consumed; '' when nothing is buffered
        self._line = ""
        self._exhausted = False

    def _read_line(self) -> str:
        """Pull one line from the handle, returning '' at end of stream."""
        if self._exhausted:
            return ""
        line = self._handle.readline()
        if isinstance(line, bytes):
            line = line.decode(self._encoding)
        if not line:
            self._exhausted = True
        return line

    def read_next(self) -> FastaRecord:
        """
        Read the next record from the stream.

        Returns:
            The next FastaRecord, fully materialized

        Raises:
            EndOfInput: The stream holds no further records
            FastaFormatError: The next record does not begin with a name line
        """
        if not self._line:
            self._line = self._read_line()
            if not self._line:
                logger.debug("End of FASTA input")
                raise EndOfInput("end of input")

        if not is_name(self._line):
            logger.warning("Expected a name line, got %r", self._line[:40])
            raise FastaFormatError("invalid format")

        name = get_name(self._line)
        seq_parts: List[str] = []
        while True:
            line = self._read_line()
            if not line or is_name(line):
                break
            seq_parts.append(get_sequence(line))

        self._line = line
        record = FastaRecord(name=name, sequence="".join(seq_parts))
        logger.debug("Read record %s (%d symbols)", record.name, len(record))
        return record

    def iterate(self) -> Iterator[Union[FastaRecord, FastaFormatError]]:
        """
        Iterate over the remaining records.

        End of input finishes the iteration. A format error is yielded
        as an element instead of being raised, after which iteration
        stops since the reader cannot make progress past it.
        """
        while True:
            try:
                record = self.read_next()
            except EndOfInput:
                return
            except FastaFormatError as err:
                yield err
                return
            yield record

    def __iter__(self) -> Iterator[Union[FastaRecord, FastaFormatError]]:
        return self.iterate()


def read_fasta(handle: IO) -> Iterator[FastaRecord]:
    """
    Read sequences from an open FASTA handle.

    Unlike FastaReader.iterate, a format error is raised rather than
    yielded.

    Args:
        handle: Readable text or binary handle, left open

    Yields:
        FastaRecord objects

    Example:
        >>> with open("sequences.fasta") as f:
        ...     for record in read_fasta(f):
        ...         print(f"{record.name}: {len(record)} bp")
    """
    for item in FastaReader(handle):
        if isinstance(item, FastaFormatError):
            raise item
        yield item


def parse_fasta_string(content: str) -> Iterator[FastaRecord]:
    """
    Parse FASTA format from a string.

    Args:
        content: FASTA formatted string

    Yields:
        FastaRecord objects
    """
    yield from read_fasta(io.StringIO(content))


def load_fasta_dict(handle: IO) -> Dict[str, str]:
    """
    Load a FASTA handle as a dictionary mapping names to sequences.

    Later records with a repeated name replace earlier ones.
    """
    return {
        record.name: record.sequence
        for record in read_fasta(handle)
    }
