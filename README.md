# orientfix

Tools that find and fix wrongly oriented contigs in scaffolds. They use
contig-to-contig links counted from long reads, for example Oxford Nanopore
reads mapped to contigs.

The package has five command-line tools and a small Python API. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Relative orientation of a contig pair

Contig pairs are always stored with the smaller contig id first. The relative
orientation of the two contigs (`OOType` in `orientfix.pairinfo`) has one of
four values:

| member      | meaning                         | written as |
|-------------|---------------------------------|------------|
| `C1_2_C2`   | c1 forward, then c2 forward     | `++`       |
| `C1_2_C2P`  | c1 forward, then c2 reverse     | `+-`       |
| `C1P_2_C2`  | c1 reverse, then c2 forward     | `-+`       |
| `C1P_2_C2P` | c1 reverse, then c2 reverse     | `--`       |

`OOType.UNKNOWN` is written as `**`. When a pair is swapped so that the
smaller id comes first, `++` and `--` change into each other and the mixed
types stay as they are (`get_cr`). `oo_from_strands` and `oo_to_string`
convert between strands and types.

## Pair link file

Several tools read or write whitespace-separated pair link lines:

```
c1  c2  n(++)  n(+-)  n(-+)  n(--)
```

Each count is the number of reads that support one relative orientation. The
orientation with the highest count is the pair's dominant type
(`PairCounts.dominant_type`); ties go to the first of `++`, `+-`, `-+`, `--`.
The voting and triple tools require `c1 < c2` and raise `ValueError`
otherwise. Blank lines are skipped by every tool.

## Command-line tools

### orientfix-contigmapper

```
orientfix-contigmapper < contigs_on_reads.paf > pair_links.txt
```

Reads contig-on-read alignments from standard input. Each line holds the
contig name, contig length, start, end, strand, read name, read length, read
start, read end, match length, alignment length and mapping quality. The
contig id is the integer at the start of the contig name. For every read, each
hit of one contig is compared with each hit of every other contig on that
read; if one hit lies wholly before the other on the read, one read of support
is counted for the implied orientation. The tool writes one tab-separated pair
link line per contig pair, sorted by contig ids. It takes no arguments; given
any, it prints a usage line and exits with status 1.

### orientfix-correct

```
orientfix-correct scaff_info pair_links.txt [--mode {dominant,single,all}] > corrected_scaff_info
```

Reads a scaffold layout and a pair link file and writes the layout again with
the strand of some contigs flipped. The layout has a header line for each
scaffold, `>scaffold<id>`, followed by one line per contig:

```
contig_id  +/-  gap_size  contig_len  start_pos  scaff_index  scaff_id
```

Contigs are renumbered from 1 within each scaffold before voting, and the
output lists scaffolds in ascending id order. Each contig starts with one vote
for its current strand. Every pair link between two contigs of the same
scaffold adds votes to both contigs; links naming contigs outside the layout
or in different scaffolds are ignored. `--mode` chooses the weighting:

- `dominant` (default): the dominant orientation, weighted by its count
- `single`: the dominant orientation, one vote per link line
- `all`: every orientation with a non-zero count, weighted by that count

A contig is flipped when the votes against its current strand win; a tie
keeps it. The tool reports on standard error how many contigs it voted on and
how many it changed.

### orientfix-quast2oo

```
orientfix-quast2oo < alignments.txt > reference_pairs.txt
```

Reads contig-to-reference alignments sorted along the reference. Each line
holds the reference start, reference end, contig start, contig end, reference
name and contig name; the contig name must start with its numeric id. A block
whose contig start is below its contig end is forward (`+`), otherwise
reverse (`-`). For each two consecutive blocks on the same reference the tool
writes

```
c1  c2  orientation  gap_size
```

with `c1 < c2`, `orientation` one of `++`, `+-`, `-+`, `--`, and `gap_size`
the reference bases between the two blocks (next start − previous end − 1).
Two consecutive blocks of the same contig raise `ValueError`.

### orientfix-oochecker

```
orientfix-oochecker pair_links.txt contig_map.txt > checked_pairs.txt
```

Compares every pair link with the true placement of the contigs. Each line of
`contig_map.txt` holds the contig id, strand, reference name, start, end and
index along the reference. Every pair link line is written back, tab-separated,
with two more columns: a verdict and a step. The verdict is `Correct`,
`Wrong_OO`, `Diff_Chromosome` or `Unmatch`. The step is the distance between
the two contigs' reference indexes for correct pairs and 0 for all others.

### orientfix-tricontig

```
orientfix-tricontig pair_links.txt triples.txt > triple_report.txt
```

Checks chains of three contigs against the dominant orientations of the pair
links. Each line of `triples.txt` holds `c1 c2 c3 t1 t2 t3`: three contig ids
and their strands (the strands may also be written together, as in `+-+`). A
line is written back with a tab and a label when something is wrong with it:

- `misassembled`: two of the three contigs are the same
- `no_reads`: a contig appears in no pair link
- `123`: neither the c1–c2 link nor the c2–c3 link is present
- `12`: the c1–c2 link is missing
- `23`: the c2–c3 link is missing

Triples whose two links are both present are not written.

## Python API

```python
from orientfix.scaffinfo import ScaffoldSet
from orientfix.corrector import correct
from orientfix.votes import VoteMode

with open("scaff_info") as scaff_file:
    scaffolds = ScaffoldSet.load(scaff_file)

with open("pair_links.txt") as pair_file:
    total, changed = correct(scaffolds, pair_file, VoteMode.DOMINANT)

with open("corrected_scaff_info", "w") as out:
    scaffolds.write(out)
```

`collect_votes` and `apply_votes` in `orientfix.votes` give finer control over
the voting; `OrientationVote.is_pos` tells the winning strand of one contig.
The other building blocks are:

- `orientfix.pairinfo`: `OOType`, `PairPN`, `PairCounts`
- `orientfix.scaffinfo`: `ContigDetail`, `Scaffold`, `ScaffoldSet`
- `orientfix.quast2oo`: `QuastContig`, `gap_size`, `convert`
- `orientfix.contigmapper`: `MapInfo`, `LinkCounts`, `compute_links`, `format_links`
- `orientfix.oochecker`: `ContigMapInfo`, `expected_type`, `check_pair`, `check_lines`
- `orientfix.tricontig`: `TriConnInfo`, `load_pairs`, `classify`

Malformed input lines raise `ValueError`.

## What this package does not do

It does not align reads or contigs itself; the alignment tables it reads must
be produced by an aligner beforehand. It does not assemble, order or gap-fill
scaffolds: `orientfix-correct` only changes the strand of contigs already
placed in a layout.