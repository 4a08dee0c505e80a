"""Unit tests for scoring module.

Tests:
- Binding site table contents and ambiguity expansion
- Promoter extraction
- Overlapping motif counting and propensity totals
- Scoring a gene collection
"""

import dataclasses

import pytest

from glucose_pipeline.genes import GeneRecord
from glucose_pipeline.scoring import (
    BINDING_SITES,
    BindingSite,
    binding_site_contributions,
    build_binding_sites,
    compute_propensity,
    count_occurrences,
    expand_ambiguity,
    extract_promoter,
    score_genes,
    score_promoter,
)


# ============================================================================
# Binding site table
# ============================================================================

def test_binding_sites_match_published_table():
    """Table holds the 17 literal motifs in classifier order."""
    expected = [
        ("aaaccctaa", 2.9895),
        ("ggaagggt", 1.3346),
        ("ggtagggt", 1.3346),
        ("aacgtgt", 1.1033),
        ("acggg", 0.9637),
        ("gcggcaaa", 0.9067),
        ("gttaggtt", 0.8397),
        ("accgac", 0.8076),
        ("gccgac", 0.8076),
        ("gataaga", -3.3202),
        ("gataagg", -3.3202),
        ("gataa", -2.1431),
        ("gataag", -0.7107),
        ("ggata", -3.2140),
        ("acgtggca", -1.1698),
        ("taacgta", -0.9167),
        ("aaaatatct", -0.8441),
    ]

    assert [(s.motif, s.weight) for s in BINDING_SITES] == expected


def test_binding_sites_motifs_unique():
    motifs = [s.motif for s in BINDING_SITES]
    assert len(motifs) == len(set(motifs))


def test_binding_sites_immutable():
    assert isinstance(BINDING_SITES, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        BINDING_SITES[0].weight = 0.0


def test_expand_ambiguity_purine():
    assert expand_ambiguity("rccgac") == ["accgac", "gccgac"]


def test_expand_ambiguity_literal_and_any():
    assert expand_ambiguity("ACGT") == ["acgt"]
    assert expand_ambiguity("an") == ["aa", "ac", "ag", "at"]


def test_expand_ambiguity_rejects_unknown_code():
    with pytest.raises(ValueError, match="Unknown IUPAC code"):
        expand_ambiguity("acxg")


def test_build_binding_sites_shares_weight():
    sites = build_binding_sites([("gata", -1.0), ("yc", 0.5)])
    assert [(s.motif, s.weight) for s in sites] == [
        ("gata", -1.0),
        ("cc", 0.5),
        ("tc", 0.5),
    ]


@pytest.mark.parametrize("motif", ["", "acgu", "ACGT", "rccgac"])
def test_binding_site_rejects_invalid_motif(motif):
    with pytest.raises(ValueError):
        BindingSite(motif, 1.0)


# ============================================================================
# Promoter extraction
# ============================================================================

def test_extract_promoter_keeps_lowercase_in_order():
    assert extract_promoter("ACGTaccgacGGGaccgacTTT") == "accgacaccgac"


def test_extract_promoter_empty_and_uppercase():
    assert extract_promoter("") == ""
    assert extract_promoter("ACGT") == ""


def test_extract_promoter_drops_digits_and_punctuation():
    assert extract_promoter("ac-1GT,gt N") == "acgt"


def test_extract_promoter_does_not_fold_case():
    promoter = extract_promoter("xYz")
    assert promoter == "xz"


# ============================================================================
# Motif counting
# ============================================================================

def test_count_occurrences_counts_overlaps():
    assert count_occurrences("aaaa", "aaa") == 2
    assert count_occurrences("aaaaa", "aa") == 4


def test_count_occurrences_no_match():
    assert count_occurrences("", "acggg") == 0
    assert count_occurrences("acg", "acggg") == 0
    assert count_occurrences("tttttt", "acggg") == 0


def test_overlapping_contribution():
    """'aaa' in 'aaaa' matches at offsets 0 and 1."""
    weight = 0.75
    result = score_promoter("aaaa", [BindingSite("aaa", weight)])
    assert result.contributions["aaa"] == 2 * weight
    assert result.total == 2 * weight


# ============================================================================
# Propensity
# ============================================================================

def test_score_promoter_empty():
    result = score_promoter("")
    assert result.total == 0.0
    assert len(result.contributions) == len(BINDING_SITES)
    assert all(v == 0.0 for v in result.contributions.values())


def test_score_promoter_total_equals_sum_of_contributions():
    promoter = "gataagaaaccctaaacgggggatagccgacaaaatatcttaacgtacgtggca"
    result = score_promoter(promoter)
    assert result.total == sum(result.contributions.values())
    assert list(result.contributions) == [s.motif for s in BINDING_SITES]


def test_score_promoter_motifs_counted_independently():
    """gataaga also contains gataa and gataag; all three count."""
    result = score_promoter("gataaga")
    assert result.contributions["gataaga"] == pytest.approx(-3.3202)
    assert result.contributions["gataa"] == pytest.approx(-2.1431)
    assert result.contributions["gataag"] == pytest.approx(-0.7107)
    assert result.total == pytest.approx(-3.3202 - 2.1431 - 0.7107)


def test_compute_propensity_end_to_end():
    sequence = "ACGTaccgacGGGaccgacTTT"
    contributions = binding_site_contributions(sequence)

    assert contributions["accgac"] == 2 * 0.8076
    assert compute_propensity(sequence) == pytest.approx(1.6152)
    assert compute_propensity(sequence) == sum(contributions.values())


def test_score_promoter_lowercase_run_with_acggg():
    """'accgacgggaccgacttt' holds accgac twice and acggg once."""
    result = score_promoter("accgacgggaccgacttt")
    assert result.contributions["accgac"] == pytest.approx(1.6152)
    assert result.contributions["acggg"] == pytest.approx(0.9637)
    assert result.total == pytest.approx(2.5789)


def test_compute_propensity_ignores_uppercase_region():
    assert compute_propensity("AAACCCTAA") == 0.0
    assert compute_propensity("aaaccctaaAAACCCTAA") == pytest.approx(2.9895)


def test_compute_propensity_custom_table():
    sites = [BindingSite("ac", 1.0), BindingSite("cg", -0.5)]
    assert compute_propensity("acgACGacg", sites) == pytest.approx(1.0)


# ============================================================================
# Gene collection scoring
# ============================================================================

def test_score_genes_assigns_propensity():
    genes = [
        GeneRecord(gene_id="AT1", sequence="aaaccctaaCCC"),
        GeneRecord(gene_id="AT2", sequence="ACGT"),
        GeneRecord(gene_id="AT3", sequence="AAAAgataagaTTTT"),
    ]

    result = score_genes(genes)

    assert result is genes
    assert genes[0].propensity == pytest.approx(2.9895)
    assert genes[1].propensity == 0.0
    assert genes[2].propensity == pytest.approx(-6.174)


def test_score_genes_overwrites_loaded_propensity():
    genes = [GeneRecord(gene_id="AT1", sequence="ACGT", propensity=9.5)]
    score_genes(genes)
    assert genes[0].propensity == 0.0


def test_score_genes_empty():
    assert score_genes([]) == []
