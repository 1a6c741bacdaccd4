"""
Core Mastery Module.

Canonical data model for learner progress. Both the scheduler and the
update rule read and write these types; storage layers own their lifecycle.

Design:
- MasteryLevel: Enum for categorizing mastery scores (display only)
- MasteryEntity: One representation variant's progress score (0-100)
- ConceptGroup: A learnable unit aggregating one or more variants
- PracticeSet: An ordered collection of groups forming one session's scope
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID, uuid4

from birdly_engine.config import get_settings


def _default_variant() -> str:
    return get_settings().primary_variant


class MasteryLevel(str, Enum):
    """
    Mastery level categorization.

    Bands match the progress colours shown in the bird log.
    """

    NOT_STARTED = "not_started"  # 0
    STRUGGLING = "struggling"  # 1-24
    LEARNING = "learning"  # 25-49
    FAMILIAR = "familiar"  # 50-79
    MASTERED = "mastered"  # 80-100

    @classmethod
    def from_score(cls, score: float) -> MasteryLevel:
        """
        Convert a 0-100 mastery score to a level.

        Args:
            score: Mastery score between 0 and 100

        Returns:
            Corresponding MasteryLevel
        """
        if score <= 0:
            return cls.NOT_STARTED
        elif score < 25:
            return cls.STRUGGLING
        elif score < 50:
            return cls.LEARNING
        elif score < 80:
            return cls.FAMILIAR
        else:
            return cls.MASTERED

    @property
    def display_name(self) -> str:
        """Human-readable name."""
        return self.value.replace("_", " ").title()

    @property
    def color(self) -> str:
        """Rich color for CLI display."""
        return {
            MasteryLevel.NOT_STARTED: "dim",
            MasteryLevel.STRUGGLING: "red",
            MasteryLevel.LEARNING: "yellow",
            MasteryLevel.FAMILIAR: "cyan",
            MasteryLevel.MASTERED: "green",
        }[self]


@dataclass
class MasteryEntity:
    """
    Progress state of one representation variant (e.g. a "perched" photo).

    Mastery starts at 0 meaning "unseen" and stays within [1, 100] once the
    first attempt has been recorded.
    """

    variant: str = field(default_factory=_default_variant)
    mastery: float = 0.0
    id: UUID = field(default_factory=uuid4)

    @property
    def is_seen(self) -> bool:
        return self.mastery > 0

    @property
    def level(self) -> MasteryLevel:
        return MasteryLevel.from_score(self.mastery)


@dataclass
class ConceptGroup:
    """
    A learnable unit (e.g. a species) with one or more variants.

    Aggregate mastery is the arithmetic mean of member mastery. A group
    without members has aggregate mastery 0 and counts as unseen. Without an
    explicit ``primary_variant`` the configured primary tag is used.
    """

    label: str
    entities: list[MasteryEntity] = field(default_factory=list)
    primary_variant: str | None = None
    id: UUID = field(default_factory=uuid4)

    @property
    def aggregate_mastery(self) -> float:
        """Mean mastery of all variants (0-100)."""
        if not self.entities:
            return 0.0
        return sum(entity.mastery for entity in self.entities) / len(self.entities)

    @property
    def is_new(self) -> bool:
        """True until any variant has been practiced."""
        return self.aggregate_mastery == 0

    @property
    def level(self) -> MasteryLevel:
        return MasteryLevel.from_score(self.aggregate_mastery)

    @property
    def primary_tag(self) -> str:
        return self.primary_variant or get_settings().primary_variant

    @property
    def primary_entity(self) -> MasteryEntity | None:
        """The variant tagged as primary, else the first-created one."""
        tag = self.primary_tag
        for entity in self.entities:
            if entity.variant == tag:
                return entity
        return self.entities[0] if self.entities else None

    @property
    def alternates(self) -> list[MasteryEntity]:
        """Every variant except the primary one."""
        primary = self.primary_entity
        return [entity for entity in self.entities if entity is not primary]


@dataclass
class PracticeSet:
    """
    Ordered collection of concept groups forming one session's scope.

    Progress is the mean of member aggregate mastery normalized to [0, 1].
    """

    groups: list[ConceptGroup] = field(default_factory=list)
    title: str = ""
    id: UUID = field(default_factory=uuid4)

    @property
    def progress(self) -> float:
        """Overall progress between 0 and 1."""
        if not self.groups:
            return 0.0
        total = sum(group.aggregate_mastery for group in self.groups)
        return total / len(self.groups) / 100.0

    @property
    def new_groups(self) -> list[ConceptGroup]:
        return [group for group in self.groups if group.is_new]

    @property
    def introduced_groups(self) -> list[ConceptGroup]:
        return [group for group in self.groups if not group.is_new]

    def iter_entities(self):
        """Yield every variant of every group in order."""
        for group in self.groups:
            yield from group.entities


def reset_mastery(practice_set: PracticeSet) -> int:
    """
    Reset every variant in the set back to unseen.

    Args:
        practice_set: Set whose progress should be cleared

    Returns:
        Number of variants reset
    """
    count = 0
    for entity in practice_set.iter_entities():
        entity.mastery = 0.0
        count += 1
    return count
