import io

import pytest

from orientfix.corrector import correct, main
from orientfix.scaffinfo import ScaffoldSet
from orientfix.votes import VoteMode

LAYOUT = """>scaffold1
1\t+\t0\t100\t0\t5\t1
2\t+\t10\t200\t110\t9\t1
>scaffold2
3\t-\t0\t300\t0\t1\t2
"""


def _load() -> ScaffoldSet:
    return ScaffoldSet.load(io.StringIO(LAYOUT))


def _strands(scaffolds: ScaffoldSet) -> dict[int, bool]:
    return {cid: scaffolds.get_contig(cid).orientation for cid in scaffolds.contig_ids}


def test_supporting_pair_keeps_all_strands():
    scaffolds = _load()
    before = _strands(scaffolds)
    total, changed = correct(scaffolds, ["1 2 5 0 0 0"], VoteMode.DOMINANT)
    assert total == len(before)
    assert changed == 0
    assert _strands(scaffolds) == before


def test_opposing_pair_flips_both_contigs():
    scaffolds = _load()
    before = _strands(scaffolds)
    total, changed = correct(scaffolds, ["1 2 0 0 0 5"], VoteMode.DOMINANT)
    after = _strands(scaffolds)
    assert after[1] is not before[1]
    assert after[2] is not before[2]
    assert after[3] is before[3]
    assert changed == sum(after[c] != before[c] for c in before)


def test_single_mode_ties_with_scaffold_vote():
    scaffolds = _load()
    before = _strands(scaffolds)
    _, changed = correct(scaffolds, ["1 2 0 0 0 5"], VoteMode.SINGLE)
    assert changed == 0
    assert _strands(scaffolds) == before


def test_all_mode_counts_every_orientation():
    dominant = _load()
    _, changed_dominant = correct(dominant, ["1 2 4 0 0 5"], VoteMode.DOMINANT)
    everything = _load()
    before = _strands(everything)
    _, changed_all = correct(everything, ["1 2 4 0 0 5"], VoteMode.ALL)
    assert changed_dominant > changed_all
    assert _strands(everything) == before


def test_pairs_across_scaffolds_are_ignored():
    scaffolds = _load()
    before = _strands(scaffolds)
    _, changed = correct(scaffolds, ["1 3 0 0 0 50", "2 99 0 0 0 50"], "dominant")
    assert changed == 0
    assert _strands(scaffolds) == before


def test_correct_reindexes_scaffolds():
    scaffolds = _load()
    correct(scaffolds, [], VoteMode.DOMINANT)
    assert [c.scaff_index for c in scaffolds.scaffolds[1].contigs] == [1, 2]
    assert scaffolds.get_contig(3).scaff_index == 1


def test_bad_pair_order_raises():
    with pytest.raises(ValueError):
        correct(_load(), ["2 1 5 0 0 0"], VoteMode.DOMINANT)


def test_main_writes_corrected_layout(tmp_path, capsys):
    layout = tmp_path / "layout.txt"
    layout.write_text(LAYOUT)
    pairs = tmp_path / "pairs.txt"
    pairs.write_text("1 2 0 0 0 5\n")

    assert main([str(layout), str(pairs)]) == 0
    out = capsys.readouterr().out
    result = ScaffoldSet.load(io.StringIO(out))
    assert result.contig_ids == [1, 2, 3]
    assert result.get_contig(1).orientation is False
    assert result.get_contig(2).orientation is False
    assert result.get_contig(3).orientation is False
    assert out.splitlines()[0] == ">scaffold1"


def test_main_mode_option(tmp_path, capsys):
    layout = tmp_path / "layout.txt"
    layout.write_text(LAYOUT)
    pairs = tmp_path / "pairs.txt"
    pairs.write_text("1 2 0 0 0 5\n")

    assert main([str(layout), str(pairs), "--mode", "single"]) == 0
    result = ScaffoldSet.load(io.StringIO(capsys.readouterr().out))
    assert result.get_contig(1).orientation is True


def test_main_requires_two_arguments():
    with pytest.raises(SystemExit):
        main(["only_one"])