"""Check contig pair orientations against contig positions on a reference."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator

from .pairinfo import OOType, PairCounts, oo_from_strands

_FLIP = {"+": "-", "-": "+"}
_BATCH = 10000


@dataclass(frozen=True)
class ContigMapInfo:
    """Where a contig lies on the reference."""

    contig: int
    orientation: str
    ref: str
    start: int
    end: int
    index: int

    @classmethod
    def parse(cls, line: str) -> "ContigMapInfo":
        """Parse 'contig strand ref start end index'."""
        fields = line.split()
        if len(fields) < 6:
            raise ValueError(f"contig map line needs 6 fields: {line!r}")
        try:
            return cls(
                int(fields[0]),
                fields[1],
                fields[2],
                int(fields[3]),
                int(fields[4]),
                int(fields[5]),
            )
        except ValueError as exc:
            raise ValueError(f"bad contig map line: {line!r}") from exc


def expected_type(first: ContigMapInfo, second: ContigMapInfo) -> OOType:
    """The pair orientation the reference implies for two contigs (first id smaller)."""
    if first.contig >= second.contig:
        raise ValueError(
            f"first contig must have the smaller id: {first.contig} vs {second.contig}"
        )
    if first.index > second.index:
        return oo_from_strands(
            _FLIP.get(first.orientation, first.orientation),
            _FLIP.get(second.orientation, second.orientation),
        )
    return oo_from_strands(first.orientation, second.orientation)


def check_pair(contigs: dict[int, ContigMapInfo], pair: PairCounts) -> tuple[str, int]:
    """Return the verdict on a pair and its step distance on the reference."""
    first = contigs.get(pair.c1)
    second = contigs.get(pair.c2)
    if first is None or second is None:
        return "Unmatch", 0
    if first.ref != second.ref:
        return "Diff_Chromosome", 0
    if expected_type(first, second) != pair.dominant_type():
        return "Wrong_OO", 0
    return "Correct", abs(first.index - second.index)


def check_lines(contigs: dict[int, ContigMapInfo], lines: Iterable[str]) -> Iterator[str]:
    """Yield each pair line with its counts, verdict and step."""
    for line in lines:
        if not line.strip():
            continue
        pair = PairCounts.parse(line)
        verdict, step = check_pair(contigs, pair)
        yield "\t".join(
            str(value)
            for value in (
                pair.c1,
                pair.c2,
                pair.c1_2_c2,
                pair.c1_2_c2p,
                pair.c1p_2_c2,
                pair.c1p_2_c2p,
                verdict,
                step,
            )
        )


def _load_contigs(lines: Iterable[str]) -> dict[int, ContigMapInfo]:
    contigs: dict[int, ContigMapInfo] = {}
    for line in lines:
        if line.strip():
            info = ContigMapInfo.parse(line)
            contigs[info.contig] = info
    return contigs


def main(argv: list[str] | None = None) -> int:
    """Check a pair file against a contig map and print the verdicts."""
    parser = argparse.ArgumentParser(
        prog="orientfix-oochecker",
        description="Check contig pair orientations against contig reference positions.",
    )
    parser.add_argument("pair_info_file", help="contig pair support file")
    parser.add_argument("contig_map_file", help="contig reference position file")
    args = parser.parse_args(argv)
    print(f" pair filter file ( {args.pair_info_file} )", file=sys.stderr)
    print(f" contig map  file ( {args.contig_map_file} )", file=sys.stderr)

    with open(args.contig_map_file, encoding="utf-8") as handle:
        contigs = _load_contigs(handle)

    total = 0
    with open(args.pair_info_file, encoding="utf-8") as handle:
        for line in check_lines(contigs, handle):
            sys.stdout.write(line + "\n")
            total += 1
            if total % _BATCH == 0:
                print(f" Processing {total} lines now ... ", file=sys.stderr)
    print(f" Processing {total} lines now ... ", file=sys.stderr)
    print(" Done", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())