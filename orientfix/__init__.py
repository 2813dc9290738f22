"""Check and correct contig orientation in scaffolds from long-read contig links."""

__version__ = "0.1.0"

__all__ = [
    "contigmapper",
    "corrector",
    "oochecker",
    "pairinfo",
    "quast2oo",
    "scaffinfo",
    "tricontig",
    "votes",
]