"""Correct contig strands in a scaffold layout from long-read pair support."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable

from .scaffinfo import ScaffoldSet
from .votes import VoteMode, apply_votes, collect_votes


def correct(
    scaffolds: ScaffoldSet,
    pair_lines: Iterable[str],
    mode: VoteMode = VoteMode.DOMINANT,
) -> tuple[int, int]:
    """Re-index the scaffolds, vote on every contig and flip the losers.

    Returns the number of contigs voted on and the number that were flipped.
    """
    scaffolds.format_all_index()
    votes = collect_votes(scaffolds, pair_lines, VoteMode(mode))
    changed = apply_votes(scaffolds, votes)
    return len(votes), changed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orientfix-correct",
        description="Flip contig strands in a scaffold layout that long-read pairs disagree with.",
    )
    parser.add_argument("scaff_info", help="scaffold layout file")
    parser.add_argument("ont_pair", help="contig pair support file")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in VoteMode],
        default=VoteMode.DOMINANT.value,
        help="how pair support is turned into votes (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the corrector and print the corrected layout to standard output."""
    args = _build_parser().parse_args(argv)
    print(f" scaff info  file ( {args.scaff_info} )", file=sys.stderr)
    print(f" ont pair file ( {args.ont_pair} )", file=sys.stderr)

    with open(args.scaff_info, encoding="utf-8") as layout:
        scaffolds = ScaffoldSet.load(layout)
    with open(args.ont_pair, encoding="utf-8") as pairs:
        total, changed = correct(scaffolds, pairs, VoteMode(args.mode))

    scaffolds.write(sys.stdout)
    print(f"total contig in scaffold is {total}", file=sys.stderr)
    print(f"changed contig in scaffold is {changed}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())