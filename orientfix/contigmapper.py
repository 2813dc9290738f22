"""Count contig pair orientations from contig-to-long-read alignments."""

from __future__ import annotations

import re
import sys
from collections import defaultdict
from dataclasses import astuple, dataclass
from itertools import combinations, product
from typing import Iterable, Iterator

from .pairinfo import OOType, oo_from_strands

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_FLIP = {"+": "-", "-": "+"}


@dataclass(frozen=True)
class MapInfo:
    """One alignment of a contig onto a long read."""

    contig_name: str
    contig_len: int
    contig_start: int
    contig_end: int
    contig_orientation: str
    read_name: str
    read_len: int
    read_start: int
    read_end: int
    match_len: int
    align_len: int
    mq: int

    @classmethod
    def parse(cls, line: str) -> "MapInfo":
        """Parse a 12-column alignment line with the contig as query."""
        fields = line.split()
        if len(fields) < 12:
            raise ValueError(f"alignment line needs 12 fields: {line!r}")
        try:
            contig_numbers = [int(value) for value in fields[1:4]]
            read_numbers = [int(value) for value in fields[6:12]]
        except ValueError as exc:
            raise ValueError(f"bad alignment line: {line!r}") from exc
        return cls(
            fields[0],
            *contig_numbers,
            fields[4],
            fields[5],
            *read_numbers,
        )


@dataclass
class LinkCounts:
    """Read support for the four orientations of a contig pair."""

    c1_c2: int = 0
    c1_c2p: int = 0
    c1p_c2: int = 0
    c1p_c2p: int = 0

    def _add(self, oo_type: OOType) -> None:
        if oo_type == OOType.C1_2_C2:
            self.c1_c2 += 1
        elif oo_type == OOType.C1_2_C2P:
            self.c1_c2p += 1
        elif oo_type == OOType.C1P_2_C2:
            self.c1p_c2 += 1
        elif oo_type == OOType.C1P_2_C2P:
            self.c1p_c2p += 1


def _contig_number(name: str) -> int:
    match = _LEADING_INT.match(name)
    return int(match.group(1)) if match else 0


def _link_type(first: MapInfo, second: MapInfo) -> OOType:
    if first.read_start < second.read_start and first.read_end < second.read_end:
        return oo_from_strands(first.contig_orientation, second.contig_orientation)
    if first.read_start > second.read_start and first.read_end > second.read_end:
        # The read runs through the pair backwards: both strands flip.
        return oo_from_strands(
            _FLIP.get(first.contig_orientation, first.contig_orientation),
            _FLIP.get(second.contig_orientation, second.contig_orientation),
        )
    return OOType.UNKNOWN


def _update(links: dict[tuple[int, int], LinkCounts], first: MapInfo, second: MapInfo) -> None:
    c1 = _contig_number(first.contig_name)
    c2 = _contig_number(second.contig_name)
    if c1 > c2:
        c1, c2 = c2, c1
        first, second = second, first
    oo_type = _link_type(first, second)
    if oo_type == OOType.UNKNOWN:
        return
    links.setdefault((c1, c2), LinkCounts())._add(oo_type)


def compute_links(records: Iterable[MapInfo]) -> dict[tuple[int, int], LinkCounts]:
    """Count orientation support for every pair of contigs sharing a read."""
    by_read: dict[str, dict[str, list[MapInfo]]] = defaultdict(lambda: defaultdict(list))
    for record in records:
        by_read[record.read_name][record.contig_name].append(record)

    links: dict[tuple[int, int], LinkCounts] = {}
    for contigs in by_read.values():
        for (_, first_hits), (_, second_hits) in combinations(sorted(contigs.items()), 2):
            for first, second in product(first_hits, second_hits):
                _update(links, first, second)
    return links


def format_links(links: dict[tuple[int, int], LinkCounts]) -> Iterator[str]:
    """Yield 'c1 c2 ++ +- -+ --' lines in ascending contig order."""
    for (c1, c2), counts in sorted(links.items()):
        yield "\t".join(str(value) for value in (c1, c2, *astuple(counts)))


def main(argv: list[str] | None = None) -> int:
    """Read alignments from standard input and print pair counts."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        print(
            f" Usage :{sys.argv[0]}  < you_contig_map_ont.paf >result.txt ",
            file=sys.stderr,
        )
        print(" exit ... !!! ", file=sys.stderr)
        return 1
    print(" Load data start ... ", file=sys.stderr)
    records = [MapInfo.parse(line) for line in sys.stdin if line.strip()]
    print(" Load data end ... ", file=sys.stderr)
    print(" Calc link start ... ", file=sys.stderr)
    links = compute_links(records)
    print(" Calc link end ... ", file=sys.stderr)
    print(" Print data start ... ", file=sys.stderr)
    for line in format_links(links):
        sys.stdout.write(line + "\n")
    print(" Print data end ... ", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())