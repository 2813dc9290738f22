"""Classify three-contig joins by whether long-read pairs support them."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable

from .pairinfo import PairCounts, PairPN

_BATCH = 10000


@dataclass(frozen=True)
class TriConnInfo:
    """Three consecutive contigs with their strands."""

    c1: int
    c2: int
    c3: int
    t1: str
    t2: str
    t3: str

    @classmethod
    def parse(cls, line: str) -> "TriConnInfo":
        """Parse 'c1 c2 c3 t1 t2 t3'; the strands may also be written together."""
        fields = line.split()
        if len(fields) < 4:
            raise ValueError(f"join line needs three contigs and three strands: {line!r}")
        try:
            c1, c2, c3 = (int(value) for value in fields[:3])
        except ValueError as exc:
            raise ValueError(f"bad join line: {line!r}") from exc
        strands = "".join(fields[3:])
        if len(strands) < 3:
            raise ValueError(f"join line needs three strands: {line!r}")
        return cls(c1, c2, c3, strands[0], strands[1], strands[2])

    def valid(self) -> bool:
        """True when the three contigs are all different."""
        return self.c1 != self.c2 and self.c2 != self.c3 and self.c1 != self.c3

    def first_pair(self) -> PairPN:
        return PairPN.from_ref(self.c1, self.t1, self.c2, self.t2, 0)

    def second_pair(self) -> PairPN:
        return PairPN.from_ref(self.c2, self.t2, self.c3, self.t3, 0)


def load_pairs(lines: Iterable[str]) -> tuple[set[PairPN], set[int]]:
    """Return the dominant pairs of a pair file and every contig it names."""
    pairs: set[PairPN] = set()
    contigs: set[int] = set()
    for line in lines:
        if not line.strip():
            continue
        counts = PairCounts.parse(line)
        if counts.c1 >= counts.c2:
            raise ValueError(f"pair line must list the smaller contig first: {line!r}")
        pairs.add(counts.to_pair())
        contigs.update((counts.c1, counts.c2))
    return pairs, contigs


def classify(info: TriConnInfo, pairs: set[PairPN], contigs: set[int]) -> str | None:
    """Return the problem with a join, or None when both its pairs are supported.

    '123' means neither pair is supported, '12' only the second one and
    '23' only the first one.
    """
    if not info.valid():
        return "misassembled"
    if not {info.c1, info.c2, info.c3} <= contigs:
        return "no_reads"
    has_first = info.first_pair() in pairs
    has_second = info.second_pair() in pairs
    if not has_first and not has_second:
        return "123"
    if not has_first:
        return "12"
    if not has_second:
        return "23"
    return None


def main(argv: list[str] | None = None) -> int:
    """Print every join that the pair file does not fully support."""
    parser = argparse.ArgumentParser(
        prog="orientfix-tricontig",
        description="Report three-contig joins lacking long-read pair support.",
    )
    parser.add_argument("pair_info_file", help="contig pair support file")
    parser.add_argument("contig_map_file", help="three-contig join file")
    args = parser.parse_args(argv)
    print(f" pair filter file ( {args.pair_info_file} )", file=sys.stderr)
    print(f" contig map  file ( {args.contig_map_file} )", file=sys.stderr)

    with open(args.pair_info_file, encoding="utf-8") as handle:
        pairs, contigs = load_pairs(handle)

    index = 0
    with open(args.contig_map_file, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            index += 1
            verdict = classify(TriConnInfo.parse(line), pairs, contigs)
            if verdict is not None:
                sys.stdout.write(f"{line}\t{verdict}\n")
            if index % _BATCH == 0:
                print(f"processing {index}... ", file=sys.stderr)
    print(f"processing {index} and finish now", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())