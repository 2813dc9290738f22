import io

import pytest

from orientfix.scaffinfo import ScaffoldSet
from orientfix.votes import OrientationVote, VoteMode, apply_votes, collect_votes


def _layout(*scaffolds):
    lines = []
    for scaff_id, contigs in scaffolds:
        lines.append(f">scaffold{scaff_id}")
        for contig_id, strand in contigs:
            lines.append(f"{contig_id}\t{strand}\t0\t100\t0\t0\t{scaff_id}")
    result = ScaffoldSet.load(lines)
    result.format_all_index()
    return result


def test_initial_vote_follows_scaffold_strand():
    plus = OrientationVote(7, True)
    minus = OrientationVote(8, False)
    assert (plus.b_count, plus.p_count) == (1, 0)
    assert (minus.b_count, minus.p_count) == (0, 1)
    assert plus.is_pos() is True
    assert minus.is_pos() is False


def test_tie_keeps_scaffold_strand():
    assert OrientationVote(1, False, b_count=3, p_count=3).is_pos() is False
    assert OrientationVote(1, True, b_count=2, p_count=2).is_pos() is True
    assert OrientationVote(1, True, b_count=1, p_count=2).is_pos() is False


def test_supporting_pair_adds_keep_votes():
    scaffolds = _layout((1, [(1, "+"), (2, "+")]))
    support = 5
    votes = collect_votes(scaffolds, [f"1 2 {support} 0 0 0"], VoteMode.DOMINANT)
    assert votes[1].b_count == 1 + support
    assert votes[2].b_count == 1 + support
    assert votes[1].p_count == 0
    assert apply_votes(scaffolds, votes) == 0
    assert scaffolds.get_contig(1).orientation is True


def test_opposing_pair_flips_both_contigs():
    scaffolds = _layout((1, [(1, "+"), (2, "+")]))
    votes = collect_votes(scaffolds, ["1 2 0 0 0 5"], VoteMode.DOMINANT)
    assert apply_votes(scaffolds, votes) == 2
    assert scaffolds.get_contig(1).orientation is False
    assert scaffolds.get_contig(2).orientation is False
    out = io.StringIO()
    scaffolds.write(out)
    assert "1\t-\t" in out.getvalue()


def test_single_mode_counts_one_vote_per_line():
    scaffolds = _layout((1, [(1, "+"), (2, "+")]))
    votes = collect_votes(scaffolds, ["1 2 0 0 0 5"], VoteMode.SINGLE)
    assert votes[1].b_count == votes[1].p_count
    assert apply_votes(scaffolds, votes) == 0
    assert scaffolds.get_contig(2).orientation is True


def test_all_mode_uses_every_supported_orientation():
    scaffolds = _layout((1, [(1, "+"), (2, "+")]))
    keep, flip = 3, 2
    dominant = collect_votes(scaffolds, [f"1 2 {keep} 0 0 {flip}"], VoteMode.DOMINANT)
    everything = collect_votes(scaffolds, [f"1 2 {keep} 0 0 {flip}"], VoteMode.ALL)
    assert dominant[1].p_count == 0
    assert everything[1].p_count == flip
    assert everything[1].b_count == dominant[1].b_count == 1 + keep


def test_reversed_order_in_scaffold_inverts_votes():
    scaffolds = _layout((1, [(2, "+"), (1, "+")]))
    votes = collect_votes(scaffolds, ["1 2 4 0 0 0"], VoteMode.DOMINANT)
    assert votes[1].p_count == 4
    assert votes[2].p_count == 4
    assert apply_votes(scaffolds, votes) == 2


def test_mixed_orientation_votes_split():
    scaffolds = _layout((1, [(1, "+"), (2, "+")]))
    votes = collect_votes(scaffolds, ["1 2 0 6 0 0"], VoteMode.DOMINANT)
    assert votes[1].is_pos() is True
    assert votes[2].is_pos() is False
    assert apply_votes(scaffolds, votes) == 1
    assert scaffolds.get_contig(2).orientation is False


def test_pairs_outside_one_scaffold_are_ignored():
    scaffolds = _layout((1, [(1, "+")]), (2, [(2, "+")]))
    votes = collect_votes(scaffolds, ["1 2 0 0 0 9", "1 99 0 0 0 9", ""], VoteMode.DOMINANT)
    assert sorted(votes) == [1, 2]
    assert all(v.p_count == 0 and v.b_count == 1 for v in votes.values())


def test_bad_pair_lines_raise():
    scaffolds = _layout((1, [(1, "+"), (2, "+")]))
    with pytest.raises(ValueError):
        collect_votes(scaffolds, ["2 1 1 0 0 0"], VoteMode.DOMINANT)
    with pytest.raises(ValueError):
        collect_votes(scaffolds, ["1 2 x"], VoteMode.DOMINANT)