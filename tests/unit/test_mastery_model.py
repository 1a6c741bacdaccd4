"""
Unit tests for the mastery data model.
"""

import pytest

from birdly_engine.core.mastery import (
    ConceptGroup,
    MasteryEntity,
    MasteryLevel,
    PracticeSet,
    reset_mastery,
)


class TestMasteryLevel:
    @pytest.mark.parametrize(
        "score,level",
        [
            (0.0, MasteryLevel.NOT_STARTED),
            (1.0, MasteryLevel.STRUGGLING),
            (25.0, MasteryLevel.LEARNING),
            (50.0, MasteryLevel.FAMILIAR),
            (80.0, MasteryLevel.MASTERED),
            (100.0, MasteryLevel.MASTERED),
        ],
    )
    def test_from_score(self, score, level):
        assert MasteryLevel.from_score(score) is level

    def test_display_name(self):
        assert MasteryLevel.NOT_STARTED.display_name == "Not Started"

    def test_every_level_has_color(self):
        for level in MasteryLevel:
            assert level.color


class TestConceptGroup:
    def test_aggregate_is_mean(self, group_factory):
        group = group_factory("Robin", 10.0, 30.0, 50.0)
        assert group.aggregate_mastery == pytest.approx(30.0)

    def test_empty_group_is_unseen(self):
        group = ConceptGroup(label="Ghost")
        assert group.aggregate_mastery == 0.0
        assert group.is_new
        assert group.primary_entity is None
        assert group.alternates == []

    def test_primary_found_by_variant_tag(self):
        alt = MasteryEntity(variant="flight_side")
        primary = MasteryEntity(variant="perched")
        group = ConceptGroup(label="Wren", entities=[alt, primary], primary_variant="perched")
        assert group.primary_entity is primary
        assert group.alternates == [alt]

    def test_primary_defaults_to_first_created(self):
        first = MasteryEntity(variant="flight_side")
        second = MasteryEntity(variant="juvenile")
        group = ConceptGroup(label="Wren", entities=[first, second])
        assert group.primary_entity is first

    def test_primary_tag_from_settings(self, monkeypatch):
        monkeypatch.setenv("BIRDLY_PRIMARY_VARIANT", "perched")
        alt = MasteryEntity(variant="flight_side")
        perched = MasteryEntity(variant="perched")
        group = ConceptGroup(label="Wren", entities=[alt, perched])
        assert group.primary_tag == "perched"
        assert group.primary_entity is perched
        assert group.alternates == [alt]

    def test_explicit_tag_beats_settings(self, monkeypatch):
        monkeypatch.setenv("BIRDLY_PRIMARY_VARIANT", "perched")
        juvenile = MasteryEntity(variant="juvenile")
        group = ConceptGroup(label="Wren", entities=[MasteryEntity(variant="perched"), juvenile], primary_variant="juvenile")
        assert group.primary_entity is juvenile

    def test_entity_variant_defaults_to_primary_tag(self, monkeypatch):
        monkeypatch.setenv("BIRDLY_PRIMARY_VARIANT", "perched")
        assert MasteryEntity().variant == "perched"

    def test_partially_seen_group_is_not_new(self, group_factory):
        group = group_factory("Robin", 5.0, 0.0, 0.0)
        assert not group.is_new
        assert group.aggregate_mastery > 0


class TestPracticeSet:
    def test_progress_is_normalized_mean(self, group_factory):
        practice_set = PracticeSet(groups=[group_factory("A", 100.0), group_factory("B", 0.0)])
        assert practice_set.progress == pytest.approx(0.5)

    def test_empty_set_progress_is_zero(self):
        assert PracticeSet().progress == 0.0

    def test_partition(self, group_factory):
        seen = group_factory("A", 20.0)
        unseen = group_factory("B", 0.0)
        practice_set = PracticeSet(groups=[seen, unseen])
        assert practice_set.introduced_groups == [seen]
        assert practice_set.new_groups == [unseen]

    def test_reset_mastery(self, group_factory):
        practice_set = PracticeSet(groups=[group_factory("A", 20.0, 40.0), group_factory("B", 90.0)])
        assert reset_mastery(practice_set) == 3
        assert all(entity.mastery == 0.0 for entity in practice_set.iter_entities())
        assert practice_set.progress == 0.0
