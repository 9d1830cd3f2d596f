"""
Error kinds raised by the FASTA reader and the sequence transforms.

Every condition has its own class so calling code can tell them apart:
- EndOfInput: the stream has no more records (not a failure)
- FastaFormatError: the stream does not follow the name/sequence layout
- InvalidSymbolError: a symbol outside the supported alphabet
- UnrecognizedCodonError: a codon with no translation entry
"""

from typing import Optional


class SequenceError(Exception):
    """Base class for all errors raised by nucleo."""


class EndOfInput(SequenceError):
    """Raised by the reader when the stream holds no further records."""


class FastaFormatError(SequenceError, ValueError):
    """Raised when a record does not start with a name line."""


class InvalidSymbolError(SequenceError, ValueError):
    """
    Raised when a transform meets a symbol outside its alphabet.

    Attributes:
        symbol: The offending symbol
        position: Its 0-based index in the input sequence, if known
    """

    def __init__(self, symbol: str, position: Optional[int] = None):
        self.symbol = symbol
        self.position = position
        if position is None:
            message = f"Invalid nucleotide '{symbol}'"
        else:
            message = f"Invalid nucleotide '{symbol}' at position {position}"
        super().__init__(message)


class UnrecognizedCodonError(SequenceError, ValueError):
    """Raised when a codon has no entry in the codon tables."""

    def __init__(self, codon: str):
        self.codon = codon
        super().__init__(f"Unrecognized codon: {codon!r}")
