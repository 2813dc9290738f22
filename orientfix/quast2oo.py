"""Turn an ordered alignment listing of contigs into contig pair orientations."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from itertools import takewhile
from typing import Iterable, Iterator

from .pairinfo import PairPN


@dataclass(frozen=True)
class QuastContig:
    """One aligned block: reference span, contig span, reference and contig name."""

    r_start: int
    r_end: int
    c_start: int
    c_end: int
    ref: str
    name: str

    @classmethod
    def parse(cls, line: str) -> "QuastContig":
        """Parse 'r_start r_end c_start c_end ref contig_name'."""
        fields = line.split()
        if len(fields) < 6:
            raise ValueError(f"alignment line needs 6 fields: {line!r}")
        try:
            numbers = [int(value) for value in fields[:4]]
        except ValueError as exc:
            raise ValueError(f"bad alignment line: {line!r}") from exc
        contig = cls(*numbers, fields[4], fields[5])
        contig.contig_num  # reject names without a leading number early
        return contig

    @property
    def contig_num(self) -> int:
        """The contig number: the leading digits of the contig name."""
        digits = "".join(takewhile(str.isdigit, self.name))
        if not digits:
            raise ValueError(f"contig name has no leading number: {self.name!r}")
        return int(digits)

    @property
    def strand(self) -> str:
        """'+' when the contig aligns forward to the reference, else '-'."""
        return "+" if self.c_start < self.c_end else "-"


def gap_size(prev: QuastContig, nxt: QuastContig) -> int:
    """Reference bases between two consecutive aligned blocks."""
    return nxt.r_start - prev.r_end - 1


def convert(lines: Iterable[str]) -> Iterator[PairPN]:
    """Yield a pair for each two consecutive blocks on the same reference."""
    prev: QuastContig | None = None
    for line in lines:
        if not line.strip():
            continue
        curr = QuastContig.parse(line)
        if prev is not None and prev.ref == curr.ref:
            yield PairPN.from_ref(
                prev.contig_num,
                prev.strand,
                curr.contig_num,
                curr.strand,
                gap_size(prev, curr),
            )
        prev = curr


def main(argv: list[str] | None = None) -> int:
    """Read alignments from standard input and print pair lines."""
    argparse.ArgumentParser(
        prog="orientfix-quast2oo",
        description="Convert ordered contig alignments on standard input to contig pairs.",
    ).parse_args(argv)
    for pair in convert(sys.stdin):
        sys.stdout.write(f"{pair}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())