"""Contig pair orientation types and pair records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class OOType(IntEnum):
    """Relative orientation of two contigs joined in order c1 -> c2."""

    UNKNOWN = 0
    C1_2_C2 = 1
    C1_2_C2P = 2
    C1P_2_C2 = 3
    C1P_2_C2P = 4


_STRAND_TYPES = {
    ("+", "+"): OOType.C1_2_C2,
    ("+", "-"): OOType.C1_2_C2P,
    ("-", "-"): OOType.C1P_2_C2P,
    ("-", "+"): OOType.C1P_2_C2,
}

_TYPE_STRINGS = {
    OOType.UNKNOWN: "**",
    OOType.C1_2_C2: "++",
    OOType.C1P_2_C2: "-+",
    OOType.C1_2_C2P: "+-",
    OOType.C1P_2_C2P: "--",
}


def get_cr(oo_type: OOType) -> OOType:
    """Return the type seen when the two contigs swap places."""
    if oo_type == OOType.C1_2_C2:
        return OOType.C1P_2_C2P
    if oo_type == OOType.C1P_2_C2P:
        return OOType.C1_2_C2
    return OOType(oo_type)


def oo_to_string(oo_type: OOType) -> str:
    """Return the two-character strand notation of a type."""
    return _TYPE_STRINGS[OOType(oo_type)]


def oo_from_strands(t1: str, t2: str) -> OOType:
    """Return the type for the strands of two consecutive contigs."""
    return _STRAND_TYPES.get((t1, t2), OOType.UNKNOWN)


@dataclass(frozen=True, order=True)
class PairPN:
    """An ordered contig pair (c1 < c2) with orientation and gap size."""

    c1: int
    c2: int
    type: OOType
    gap_size: int = 0

    @classmethod
    def from_ref(cls, c1: int, t1: str, c2: int, t2: str, gap: int) -> "PairPN":
        """Build a pair from two contigs in reference order."""
        if c1 == c2:
            raise ValueError(f"a pair needs two different contigs, got {c1} twice")
        oo_type = oo_from_strands(t1, t2)
        if c1 > c2:
            c1, c2 = c2, c1
            oo_type = get_cr(oo_type)
        return cls(c1, c2, oo_type, gap)

    def __str__(self) -> str:
        return f"{self.c1}\t{self.c2}\t{oo_to_string(self.type)}\t{self.gap_size}"


@dataclass
class PairCounts:
    """Read support for the four orientations of a contig pair."""

    c1: int
    c2: int
    c1_2_c2: int
    c1_2_c2p: int
    c1p_2_c2: int
    c1p_2_c2p: int

    @classmethod
    def parse(cls, line: str) -> "PairCounts":
        """Parse 'c1 c2 ++ +- -+ --' whitespace separated counts."""
        fields = line.split()
        if len(fields) < 6:
            raise ValueError(f"pair line needs 6 fields: {line!r}")
        try:
            values = [int(field) for field in fields[:6]]
        except ValueError as exc:
            raise ValueError(f"bad pair line: {line!r}") from exc
        return cls(*values)

    def _ranked(self) -> list[tuple[OOType, int]]:
        return [
            (OOType.C1_2_C2, self.c1_2_c2),
            (OOType.C1_2_C2P, self.c1_2_c2p),
            (OOType.C1P_2_C2, self.c1p_2_c2),
            (OOType.C1P_2_C2P, self.c1p_2_c2p),
        ]

    def dominant_type(self) -> OOType:
        """The best supported orientation; ties go to the earlier type."""
        best = self.dominant_count()
        return next(oo_type for oo_type, count in self._ranked() if count == best)

    def dominant_count(self) -> int:
        """The support of the best supported orientation."""
        return max(count for _, count in self._ranked())

    def to_pair(self) -> PairPN:
        """The pair with its dominant orientation."""
        return PairPN(self.c1, self.c2, self.dominant_type())