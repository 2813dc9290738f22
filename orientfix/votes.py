"""Orientation voting: long-read pair support for or against scaffold strands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .pairinfo import OOType, PairCounts
from .scaffinfo import ScaffoldSet


class VoteMode(Enum):
    """How the support of one pair line is turned into votes."""

    DOMINANT = "dominant"  # the best orientation, weighted by its read count
    SINGLE = "single"  # the best orientation, one vote per pair line
    ALL = "all"  # every orientation with support, weighted by its read count


# For each orientation: whether c1 and c2 keep their strand when c1 precedes c2.
_SUPPORT = {
    OOType.C1_2_C2: (True, True),
    OOType.C1_2_C2P: (True, False),
    OOType.C1P_2_C2P: (False, False),
    OOType.C1P_2_C2: (False, True),
}


@dataclass
class OrientationVote:
    """Votes for keeping (b_count) or flipping (p_count) one contig."""

    contig_id: int
    from_scaff: bool
    b_count: int | None = None
    p_count: int | None = None

    def __post_init__(self) -> None:
        # The scaffold's own strand counts as one initial vote.
        if self.b_count is None:
            self.b_count = 1 if self.from_scaff else 0
        if self.p_count is None:
            self.p_count = 0 if self.from_scaff else 1

    def is_pos(self) -> bool:
        """The winning orientation; a tie keeps the scaffold's strand."""
        if self.p_count == self.b_count:
            return self.from_scaff
        return self.p_count < self.b_count

    def _add(self, keep: bool, count: int) -> None:
        if keep:
            self.b_count += count
        else:
            self.p_count += count


def _weighted_types(counts: PairCounts, mode: VoteMode) -> list[tuple[OOType, int]]:
    if mode is VoteMode.DOMINANT:
        return [(counts.dominant_type(), counts.dominant_count())]
    if mode is VoteMode.SINGLE:
        return [(counts.dominant_type(), 1)]
    return [
        (oo_type, count)
        for oo_type, count in (
            (OOType.C1_2_C2, counts.c1_2_c2),
            (OOType.C1_2_C2P, counts.c1_2_c2p),
            (OOType.C1P_2_C2P, counts.c1p_2_c2p),
            (OOType.C1P_2_C2, counts.c1p_2_c2),
        )
        if count > 0
    ]


def collect_votes(
    scaffolds: ScaffoldSet,
    pair_lines: Iterable[str],
    mode: VoteMode = VoteMode.DOMINANT,
) -> dict[int, OrientationVote]:
    """Tally orientation votes for every contig placed in the scaffolds.

    Pair lines name two contigs (first id smaller) and four counts.  Pairs
    with a contig outside the scaffolds, or whose contigs sit in different
    scaffolds, are ignored.  Contig positions are taken from scaff_index,
    so the scaffolds should already be indexed.
    """
    mode = VoteMode(mode)
    votes = {
        contig_id: OrientationVote(contig_id, scaffolds.get_contig(contig_id).orientation)
        for contig_id in scaffolds.contig_ids
    }
    for line in pair_lines:
        if not line.strip():
            continue
        counts = PairCounts.parse(line)
        if counts.c1 >= counts.c2:
            raise ValueError(f"pair line must list the smaller contig first: {line!r}")
        if not (scaffolds.has_contig(counts.c1) and scaffolds.has_contig(counts.c2)):
            continue
        first = scaffolds.get_contig(counts.c1)
        second = scaffolds.get_contig(counts.c2)
        if first.scaff_id != second.scaff_id:
            continue
        forward = first.scaff_index < second.scaff_index
        for oo_type, count in _weighted_types(counts, mode):
            keep_first, keep_second = _SUPPORT[oo_type]
            votes[counts.c1]._add(keep_first == forward, count)
            votes[counts.c2]._add(keep_second == forward, count)
    return votes


def apply_votes(scaffolds: ScaffoldSet, votes: dict[int, OrientationVote]) -> int:
    """Flip every contig whose vote disagrees with its strand; return how many."""
    changed = 0
    for contig_id in sorted(votes):
        vote = votes[contig_id]
        if vote.from_scaff != vote.is_pos():
            contig = scaffolds.get_contig(contig_id)
            contig.orientation = not contig.orientation
            changed += 1
    return changed