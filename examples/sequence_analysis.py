#!/usr/bin/env python3
"""
Example: Reading and transforming sequences with nucleo

This example demonstrates:
- Reading FASTA records one at a time
- Handling the end of input and malformed input
- Reverse complementing and translating each record
"""

import io
import logging

from nucleo import (
    EndOfInput,
    FastaFormatError,
    FastaReader,
    InvalidSymbolError,
    UnrecognizedCodonError,
    reverse_complement,
    translate_sequence,
)

SAMPLE_FASTA = """\
>Rosalind_99
AGCCATGTAGCTAACTCAGGTTACATGGGGATGACCCCGCGACTTGGATTAGAGTCTCTTTTGGAATAAGCC
TGAATGATCCGAGTAGCATCTCAG
>coding_strand
ATGGCCATGGCGCCCAGAACTGAGATCAATAGTACCCGTATTAACGGGTGA
>bad_base
ACGTNACGT
"""


def demo_read_next():
    """Pull records explicitly until the stream runs out."""
    print("\n" + "=" * 60)
    print("PULLING RECORDS")
    print("=" * 60)

    reader = FastaReader(io.StringIO(SAMPLE_FASTA))
    while True:
        try:
            record = reader.read_next()
        except EndOfInput:
            print("   <end of input>")
            break
        print(f"   {record.name}: {len(record)} bp")


def demo_transforms():
    """Reverse complement and translate every record."""
    print("\n" + "=" * 60)
    print("TRANSFORMS")
    print("=" * 60)

    for item in FastaReader(io.StringIO(SAMPLE_FASTA)):
        if isinstance(item, FastaFormatError):
            print(f"   malformed input: {item}")
            return

        print(f"\n{item.name}")
        try:
            rc = reverse_complement(item.sequence)
        except InvalidSymbolError as err:
            print(f"   reverse complement failed: {err}")
            continue
        print(f"   Reverse complement: {rc[:40]}...")

        usable = len(item.sequence) - len(item.sequence) % 3
        try:
            protein = translate_sequence(item.sequence[:usable])
        except UnrecognizedCodonError as err:
            print(f"   translation failed: {err}")
            continue
        print(f"   Protein (frame 0): {protein}")


def demo_malformed():
    """A stream must start with a name line."""
    print("\n" + "=" * 60)
    print("MALFORMED INPUT")
    print("=" * 60)

    items = list(FastaReader(io.StringIO("ACGT\n>late_name\nAAAA\n")))
    print(f"   {items}")


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    demo_read_next()
    demo_transforms()
    demo_malformed()
