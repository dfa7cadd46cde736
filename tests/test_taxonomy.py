import logging

import pytest

from researcher_stats.taxonomy import MAIN_TRACKS, Taxonomy, count_research_areas, taxonomy_from_dict

from conftest import make_record


def test_sixteen_main_tracks():
    assert len(MAIN_TRACKS) == 16
    assert len(set(MAIN_TRACKS)) == 16


def test_counts_each_track_once_per_record(records, taxonomy):
    areas = count_research_areas(records, taxonomy)
    assert [(a.area, a.count) for a in areas] == [
        ("Artificial Intelligence", 2),
        ("Computer Vision", 2),
        ("Natural Language Processing", 1),
    ]


def test_single_interest_increments_only_its_track(taxonomy):
    record = make_record("nlp", standardized_interests=("Machine Translation",))
    first = count_research_areas([record], taxonomy)
    second = count_research_areas([record], taxonomy)
    assert [(a.area, a.count) for a in first] == [("Natural Language Processing", 1)]
    assert first == second


def test_ties_keep_declared_track_order():
    taxonomy = Taxonomy(
        keywords={
            "Applied Computing": {"Bioinformatics"},
            "Artificial Intelligence": {"Machine Learning"},
        }
    )
    records = [
        make_record("a", standardized_interests=("Bioinformatics",)),
        make_record("b", standardized_interests=("Machine Learning",)),
    ]
    assert [a.area for a in count_research_areas(records, taxonomy)] == [
        "Artificial Intelligence",
        "Applied Computing",
    ]


def test_tracks_outside_main_list_are_not_reported():
    taxonomy = taxonomy_from_dict({"categories": {"Quantum Computing": ["Qubits"]}})
    record = make_record("q", standardized_interests=("Qubits",))
    assert count_research_areas([record], taxonomy) == ()


def test_bare_mapping_is_accepted():
    taxonomy = taxonomy_from_dict({"Computer Vision": ["Object Detection"]})
    assert taxonomy.labels_for("Computer Vision") == frozenset({"Object Detection"})


def test_malformed_taxonomy_degrades_to_empty(caplog):
    with caplog.at_level(logging.WARNING, logger="researcher_stats.taxonomy"):
        taxonomy = taxonomy_from_dict(
            {"categories": {"Computer Vision": "not-a-list", "Data Management": ["Databases"]}}
        )
    assert taxonomy.labels_for("Computer Vision") == frozenset()
    assert taxonomy.labels_for("Data Management") == frozenset({"Databases"})
    assert "Computer Vision" in caplog.text

    for raw in (None, [], "categories", {"categories": 42}):
        empty = taxonomy_from_dict(raw)
        assert empty.tracks == MAIN_TRACKS
        assert count_research_areas([make_record("x", standardized_interests=("Databases",))], empty) == ()


def test_taxonomy_is_read_only(taxonomy):
    with pytest.raises(TypeError):
        taxonomy.keywords["Computer Vision"] = frozenset()
