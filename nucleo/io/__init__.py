"""
Sequence file I/O.

This module provides a pull-based reader for the FASTA format.
"""

from nucleo.io.fasta import (
    FastaReader,
    FastaRecord,
    read_fasta,
    parse_fasta_string,
    load_fasta_dict,
    NAME_MARKER,
)

__all__ = [
    "FastaReader",
    "FastaRecord",
    "read_fasta",
    "parse_fasta_string",
    "load_fasta_dict",
    "NAME_MARKER",
]
