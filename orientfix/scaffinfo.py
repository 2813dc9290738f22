"""Scaffold layout files: contigs grouped under scaffold headers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, TextIO

_HEADER = re.compile(r">scaffold\s*([+-]?\d+)")


@dataclass
class ContigDetail:
    """One contig placed in a scaffold."""

    contig_id: int
    orientation: bool
    gap_size: int
    contig_len: int
    start_pos: int
    scaff_index: int
    scaff_id: int
    extra: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, line: str) -> "ContigDetail":
        """Parse 'id strand gap len start index scaffold'."""
        fields = line.split()
        if len(fields) < 7:
            raise ValueError(f"contig line needs 7 fields: {line!r}")
        try:
            contig_id = int(fields[0])
            numbers = [int(value) for value in fields[2:7]]
        except ValueError as exc:
            raise ValueError(f"bad contig line: {line!r}") from exc
        return cls(contig_id, fields[1] == "+", *numbers)

    def __str__(self) -> str:
        strand = "+" if self.orientation else "-"
        return "\t".join(
            str(value)
            for value in (
                self.contig_id,
                strand,
                self.gap_size,
                self.contig_len,
                self.start_pos,
                self.scaff_index,
                self.scaff_id,
            )
        )


@dataclass
class Scaffold:
    """An ordered list of contigs under one scaffold id."""

    scaff_id: int
    contigs: list[ContigDetail] = field(default_factory=list)

    def format_index(self) -> None:
        """Number contigs from 1 and tie them to this scaffold."""
        for index, contig in enumerate(self.contigs, start=1):
            contig.scaff_index = index
            contig.scaff_id = self.scaff_id

    def lines(self) -> Iterator[str]:
        """Yield the header line and one line per contig."""
        yield f">scaffold{self.scaff_id}"
        for contig in self.contigs:
            yield str(contig)


@dataclass
class ScaffoldSet:
    """All scaffolds of a layout, with a contig lookup."""

    scaffolds: dict[int, Scaffold] = field(default_factory=dict)
    contig_index: dict[int, tuple[int, int]] = field(default_factory=dict)

    @classmethod
    def load(cls, lines: Iterable[str]) -> "ScaffoldSet":
        """Read a layout from lines of text."""
        result = cls()
        current: int | None = None
        for raw in lines:
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            if line.startswith(">"):
                match = _HEADER.match(line)
                if match is None:
                    raise ValueError(f"bad scaffold header: {line!r}")
                current = int(match.group(1))
                result.scaffolds.setdefault(current, Scaffold(current)).scaff_id = current
                continue
            if current is None:
                raise ValueError(f"contig line before any scaffold header: {line!r}")
            contig = ContigDetail.parse(line)
            scaffold = result.scaffolds[current]
            scaffold.contigs.append(contig)
            result.contig_index[contig.contig_id] = (current, len(scaffold.contigs) - 1)
        return result

    @property
    def contig_ids(self) -> list[int]:
        """All known contig ids in ascending order."""
        return sorted(self.contig_index)

    def has_contig(self, contig_id: int) -> bool:
        return contig_id in self.contig_index

    def get_contig(self, contig_id: int) -> ContigDetail:
        """Return the contig record; KeyError if it is not in any scaffold."""
        scaff_id, position = self.contig_index[contig_id]
        return self.scaffolds[scaff_id].contigs[position]

    def format_all_index(self) -> None:
        for scaffold in self.scaffolds.values():
            scaffold.format_index()

    def write(self, stream: TextIO) -> None:
        """Write all scaffolds in ascending id order."""
        for scaff_id in sorted(self.scaffolds):
            for line in self.scaffolds[scaff_id].lines():
                stream.write(line + "\n")