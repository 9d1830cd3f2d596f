"""
Sequence manipulation utilities.

This module provides common operations for DNA/RNA sequences:
- Complement and reverse complement
- Transcription
- Codon translation
"""

from nucleo.utils.sequences import (
    complement,
    reverse_complement,
    transcribe,
    codons,
    translate_codon,
    translate_sequence,
    DNA_COMPLEMENT,
    DNA_CODON_TABLE,
    RNA_CODON_TABLE,
    STOP,
)

__all__ = [
    "complement",
    "reverse_complement",
    "transcribe",
    "codons",
    "translate_codon",
    "translate_sequence",
    "DNA_COMPLEMENT",
    "DNA_CODON_TABLE",
    "RNA_CODON_TABLE",
    "STOP",
]
