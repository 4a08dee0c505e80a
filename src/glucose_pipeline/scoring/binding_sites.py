"""Transcription factor binding site motifs associated with glucose response.

Motifs and weights are the glucose-regulation classifier features reported by
Li et al., "Establishing glucose- and ABA-regulated transcription networks in
Arabidopsis by microarray analysis and promoter classification using a
Relevance Vector Machine", Genome Research 16:414-427 (2006).

The published table uses IUPAC ambiguity codes; these are expanded into
concrete literal motifs when BINDING_SITES is built, so the scorer only ever
matches plain substrings.
"""

from dataclasses import dataclass
from itertools import product

NUCLEOTIDES = frozenset("acgt")

# IUPAC nucleotide ambiguity codes (lowercase, promoter alphabet)
IUPAC_CODES = {
    "a": "a",
    "c": "c",
    "g": "g",
    "t": "t",
    "r": "ag",  # Purine
    "y": "ct",  # Pyrimidine
    "s": "cg",  # Strong
    "w": "at",  # Weak
    "k": "gt",  # Keto
    "m": "ac",  # Amino
    "b": "cgt",  # Not A
    "d": "agt",  # Not C
    "h": "act",  # Not G
    "v": "acg",  # Not T
    "n": "acgt",  # Any
}

# Published motifs and weights, in classifier order
REFERENCE_MOTIFS = (
    ("aaaccctaa", +2.9895),
    ("ggaagggt", +1.3346),
    ("ggtagggt", +1.3346),
    ("aacgtgt", +1.1033),
    ("acggg", +0.9637),
    ("gcggcaaa", +0.9067),
    ("gttaggtt", +0.8397),
    ("rccgac", +0.8076),
    ("gataaga", -3.3202),
    ("gataagg", -3.3202),
    ("gataa", -2.1431),
    ("gataag", -0.7107),
    ("ggata", -3.2140),
    ("acgtggca", -1.1698),
    ("taacgta", -0.9167),
    ("aaaatatct", -0.8441),
)


@dataclass(frozen=True)
class BindingSite:
    """A literal promoter motif and its contribution per occurrence."""

    motif: str
    weight: float

    def __post_init__(self):
        if not self.motif:
            raise ValueError("Binding site motif must not be empty")
        invalid = set(self.motif) - NUCLEOTIDES
        if invalid:
            raise ValueError(
                f"Binding site motif {self.motif!r} contains non-nucleotide "
                f"characters: {''.join(sorted(invalid))}"
            )


def expand_ambiguity(pattern: str) -> list[str]:
    """Expand IUPAC ambiguity codes into all concrete motifs.

    Expansion order follows the code order, e.g. "rccgac" gives
    ["accgac", "gccgac"].

    Args:
        pattern: Motif possibly containing IUPAC codes (case-insensitive)

    Returns:
        List of literal acgt motifs

    Raises:
        ValueError: If the pattern contains a character that is not an IUPAC code
    """
    pattern = pattern.lower()

    unknown = [base for base in pattern if base not in IUPAC_CODES]
    if unknown:
        raise ValueError(f"Unknown IUPAC code(s) in {pattern!r}: {''.join(unknown)}")

    return ["".join(bases) for bases in product(*(IUPAC_CODES[b] for b in pattern))]


def build_binding_sites(motifs) -> tuple[BindingSite, ...]:
    """Build an immutable binding site table from (pattern, weight) pairs.

    Every concrete expansion of an ambiguous pattern shares its weight and
    takes its place in the table order.
    """
    return tuple(
        BindingSite(motif, weight)
        for pattern, weight in motifs
        for motif in expand_ambiguity(pattern)
    )


BINDING_SITES = build_binding_sites(REFERENCE_MOTIFS)
