"""
nucleo: FASTA reading and nucleotide sequence transforms

This package provides:
- An incremental FASTA reader with one line of lookahead
- Reverse complementation of DNA sequences
- Codon translation of DNA/RNA sequences with stop detection

The reader and the transforms are independent; calling code composes
them.
"""

__version__ = "0.1.0"
__author__ = "nucleo Contributors"

from nucleo.errors import (
    SequenceError,
    EndOfInput,
    FastaFormatError,
    InvalidSymbolError,
    UnrecognizedCodonError,
)

from nucleo.io import (
    FastaReader,
    FastaRecord,
    read_fasta,
    parse_fasta_string,
)

from nucleo.utils import (
    complement,
    reverse_complement,
    transcribe,
    translate_codon,
    translate_sequence,
    STOP,
)

__all__ = [
    # Errors
    "SequenceError",
    "EndOfInput",
    "FastaFormatError",
    "InvalidSymbolError",
    "UnrecognizedCodonError",
    # I/O
    "FastaReader",
    "FastaRecord",
    "read_fasta",
    "parse_fasta_string",
    # Transforms
    "complement",
    "reverse_complement",
    "transcribe",
    "translate_codon",
    "translate_sequence",
    "STOP",
]
