"""
Core sequence transforms.

Functions for complementing, transcribing and translating nucleotide
sequences. All of them are pure and hold no state, so they can be
called from anywhere without coordination.
"""

from types import MappingProxyType
from typing import Iterator

import numpy as np

from nucleo.errors import InvalidSymbolError, UnrecognizedCodonError

# Translation result for stop codons
STOP = "*"

# Watson-Crick pairs for DNA
DNA_COMPLEMENT = MappingProxyType({
    "A": "T", "T": "A", "G": "C", "C": "G",
})

# Standard genetic code (DNA codons)
DNA_CODON_TABLE = MappingProxyType({
    "TTT": "F", "TTC": "F", "TTA": "L", "TTG": "L",
    "TCT": "S", "TCC": "S", "TCA": "S", "TCG": "S",
    "TAT": "Y", "TAC": "Y", "TAA": STOP, "TAG": STOP,
    "TGT": "C", "TGC": "C", "TGA": STOP, "TGG": "W",
    "CTT": "L", "CTC": "L", "CTA": "L", "CTG": "L",
    "CCT": "P", "CCC": "P", "CCA": "P", "CCG": "P",
    "CAT": "H", "CAC": "H", "CAA": "Q", "CAG": "Q",
    "CGT": "R", "CGC": "R", "CGA": "R", "CGG": "R",
    "ATT": "I", "ATC": "I", "ATA": "I", "ATG": "M",
    "ACT": "T", "ACC": "T", "ACA": "T", "ACG": "T",
    "AAT": "N", "AAC": "N", "AAA": "K", "AAG": "K",
    "AGT": "S", "AGC": "S", "AGA": "R", "AGG": "R",
    "GTT": "V", "GTC": "V", "GTA": "V", "GTG": "V",
    "GCT": "A", "GCC": "A", "GCA": "A", "GCG": "A",
    "GAT": "D", "GAC": "D", "GAA": "E", "GAG": "E",
    "GGT": "G", "GGC": "G", "GGA": "G", "GGG": "G",
})

# Same code over the RNA alphabet
RNA_CODON_TABLE = MappingProxyType({
    codon.replace("T", "U"): amino_acid
    for codon, amino_acid in DNA_CODON_TABLE.items()
})

# Byte -> complement byte lookup, 0 marks symbols with no complement
_COMPLEMENT_LUT = np.zeros(256, dtype=np.uint8)
for _base, _pair in DNA_COMPLEMENT.items():
    _COMPLEMENT_LUT[ord(_base)] = ord(_pair)


def complement(symbol: str) -> str:
    """
    Get the Watson-Crick complement of a single DNA base.

    Raises:
        InvalidSymbolError: If symbol is not one of A, C, G, T

    Example:
        >>> complement("A")
        'T'
    """
    try:
        return DNA_COMPLEMENT[symbol]
    except KeyError:
        raise InvalidSymbolError(symbol) from None


def reverse_complement(sequence: str) -> str:
    """
    Get the reverse complement of a DNA sequence.

    Args:
        sequence: DNA sequence over A, C, G, T

    Returns:
        Reverse complement sequence, same length as the input

    Raises:
        InvalidSymbolError: For the first invalid symbol met while reading
            the sequence backwards (the rightmost one), positioned in the
            unreversed sequence

    Example:
        >>> reverse_complement("AGTC")
        'GACT'
    """
    # Non-ASCII characters become a single '?' each, keeping positions aligned
    codes = np.frombuffer(sequence.encode("ascii", "replace"), dtype=np.uint8)
    complemented = _COMPLEMENT_LUT[codes]

    invalid = np.flatnonzero(complemented == 0)
    if invalid.size:
        position = int(invalid[-1])
        raise InvalidSymbolError(sequence[position], position)

    return complemented[::-1].tobytes().decode("ascii")


def transcribe(sequence: str) -> str:
    """
    Transcribe a DNA sequence into RNA (T -> U).

    Example:
        >>> transcribe("GATGGAACTTGACTACGTAAATT")
        'GAUGGAACUUGACUACGUAAAUU'
    """
    for i, base in enumerate(sequence):
        if base not in DNA_COMPLEMENT:
            raise InvalidSymbolError(base, i)
    return sequence.replace("T", "U")


def codons(sequence: str) -> Iterator[str]:
    """
    Split a sequence into consecutive, non-overlapping codons.

    A trailing group shorter than 3 symbols is yielded as is.
    """
    for i in range(0, len(sequence), 3):
        yield sequence[i:i + 3]


def translate_codon(codon: str) -> str:
    """
    Translate one DNA or RNA codon.

    Returns:
        One-letter amino acid code, or STOP for stop codons

    Raises:
        UnrecognizedCodonError: If codon is not exactly three symbols of a
            single alphabet (DNA or RNA)
    """
    if len(codon) == 3:
        amino_acid = DNA_CODON_TABLE.get(codon) or RNA_CODON_TABLE.get(codon)
        if amino_acid is not None:
            return amino_acid
    raise UnrecognizedCodonError(codon)


def translate_sequence(
    sequence: str,
    to_stop: bool = True,
    stop_symbol: str = STOP
) -> str:
    """
    Translate a DNA or RNA sequence to protein.

    Codons are read left to right. With to_stop set, translation ends at
    the first stop codon, which is not included in the output, and no
    later codon is looked up.

    Args:
        sequence: DNA or RNA sequence
        to_stop: If True, stop translation at first stop codon
        stop_symbol: Symbol emitted for stop codons when to_stop is False

    Returns:
        Amino acid sequence

    Raises:
        UnrecognizedCodonError: For an unknown codon, including a trailing
            partial codon reached before any stop

    Example:
        >>> translate_sequence("AUGGCCAUGGCGCCCAGAACUGAGAUCAAUAGUACCCGUAUUAACGGGUGA")
        'MAMAPRTEINSTRING'
    """
    protein = []
    for codon in codons(sequence):
        amino_acid = translate_codon(codon)
        if amino_acid == STOP:
            if to_stop:
                break
            amino_acid = stop_symbol
        protein.append(amino_acid)

    return "".join(protein)
