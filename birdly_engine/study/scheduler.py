"""
Adaptive Practice Scheduler.

Decides the next practice unit for a practice set:
- Which concept group (new introduction vs. weighted review of weaker groups)
- Which exercise kind (unlocked by the group's mastery)
- Which representation variant (primary first, alternates as mastery grows)

Introductions are paced so all groups are introduced within the first part
of overall progress (the intro window). Inside the window the scheduler
introduces a new group with a probability that decays linearly from 0.8 to
0.3 while the learner is behind schedule.

The scheduler holds no session state: every call recomputes the unit from
the current mastery values, so it can be called after each attempt.
"""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from birdly_engine.config import Settings, get_settings
from birdly_engine.core.exercise import ExerciseKind, select_kind
from birdly_engine.core.mastery import ConceptGroup, MasteryEntity, PracticeSet
from birdly_engine.core.selection import select_weighted

MAX_MASTERY = 100.0


@dataclass(frozen=True)
class PracticeUnit:
    """One scheduled (group, variant, exercise kind) triple."""
    group: ConceptGroup
    entity: MasteryEntity
    kind: ExerciseKind


@dataclass
class SchedulerConfig:
    """Tuning values for the scheduler."""
    intro_window: float = 0.5
    intro_probability_floor: float = 0.3
    intro_probability_span: float = 0.5
    min_group_weight: float = 0.1
    graduation_threshold: float = 80.0
    min_exposure_threshold: float = 20.0
    primary_floor_weight: float = 0.5
    alternate_base_weight: float = 0.2

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> SchedulerConfig:
        settings = settings or get_settings()
        return cls(
            intro_window=settings.intro_window,
            intro_probability_floor=settings.intro_probability_floor,
            intro_probability_span=settings.intro_probability_span,
            min_group_weight=settings.min_group_weight,
            graduation_threshold=settings.graduation_threshold,
            min_exposure_threshold=settings.min_exposure_threshold,
            primary_floor_weight=settings.primary_floor_weight,
            alternate_base_weight=settings.alternate_base_weight,
        )


class PracticeScheduler:
    """
    Computes the next practice unit for a practice set.

    The algorithm:
    1. Split groups into new (mastery 0) and introduced
    2. Decide whether to introduce a new group (paced by set progress)
    3. Pick the group: earliest new one, or weighted toward weaker groups
    4. Pick the exercise kind from those the group's mastery unlocks
    5. Pick the variant: primary first, alternates once it has been exposed
    """

    def __init__(
        self,
        config: Optional[SchedulerConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize scheduler with configuration.

        Args:
            config: SchedulerConfig or None for values from settings
            rng: Random source (defaults to the random module)
        """
        self.config = config or SchedulerConfig.from_settings()
        self.rng = rng or random.Random()

    def advance(self, practice_set: PracticeSet) -> Optional[PracticeUnit]:
        """
        Compute the next practice unit.

        Args:
            practice_set: Set to schedule from

        Returns:
            PracticeUnit, or None when the set has no practicable groups
        """
        candidates = [group for group in practice_set.groups if group.entities]
        if not candidates:
            logger.debug(f"Practice set '{practice_set.title}' has nothing to schedule")
            return None

        new_groups = [group for group in practice_set.new_groups if group.entities]
        introduced = practice_set.introduced_groups
        progress = practice_set.progress

        introduce = self.should_introduce(
            progress=progress,
            total_groups=len(candidates),
            introduced_count=len(introduced),
            new_count=len(new_groups),
        )
        group = self.select_group(new_groups, introduced, introduce)

        if group.is_new:
            kind = ExerciseKind.INTRODUCTION
        else:
            kind = select_kind(group.aggregate_mastery, self.rng)
            if kind is None:
                kind = ExerciseKind.MULTIPLE_CHOICE

        entity = self.select_entity(group, kind)

        logger.debug(
            f"Next unit: {group.label} [{entity.variant}] as {kind.value} "
            f"(group mastery {group.aggregate_mastery:.1f}, set progress {progress:.0%})"
        )
        return PracticeUnit(group=group, entity=entity, kind=kind)

    def introduce_probability(self, progress: float) -> float:
        """
        Probability of introducing a new group while behind schedule.

        Decays linearly from floor + span at progress 0 to floor at the end
        of the intro window.
        """
        ratio = min(1.0, max(0.0, progress / self.config.intro_window))
        return self.config.intro_probability_floor + self.config.intro_probability_span * (1.0 - ratio)

    def target_introduced_count(self, progress: float, total_groups: int) -> int:
        """Number of groups that should be introduced by this progress point."""
        return math.ceil(total_groups * (progress / self.config.intro_window))

    def should_introduce(
        self,
        progress: float,
        total_groups: int,
        introduced_count: int,
        new_count: int,
    ) -> bool:
        """
        Decide whether the next unit introduces a new group.

        Only happens inside the intro window and while fewer groups are
        introduced than the pacing target.
        """
        if new_count == 0:
            return False
        if progress >= self.config.intro_window:
            return False

        target = self.target_introduced_count(progress, total_groups)
        if introduced_count >= target:
            return False

        probability = self.introduce_probability(progress)
        return self.rng.random() < probability

    def select_group(
        self,
        new_groups: list[ConceptGroup],
        introduced: list[ConceptGroup],
        introduce: bool,
    ) -> ConceptGroup:
        """
        Pick the group for the next unit.

        New groups are taken in label order. Introduced groups are drawn
        with weight ``max(min_group_weight, 100 - mastery)`` so weaker
        groups come up more often. When every introduced group is fully
        mastered, remaining new groups are introduced instead. Callers
        guarantee at least one group.
        """
        if introduce and new_groups:
            return _earliest(new_groups)

        practicable = any(group.aggregate_mastery < MAX_MASTERY for group in introduced)
        if introduced and (practicable or not new_groups):
            weights = [
                max(self.config.min_group_weight, 100.0 - group.aggregate_mastery)
                for group in introduced
            ]
            return select_weighted(introduced, weights, self.rng)
        # Nothing left to practice: fall back to the next introduction
        return _earliest(new_groups)

    def variant_weights(self, group: ConceptGroup) -> tuple[list[MasteryEntity], list[float]]:
        """
        Candidate variants and their weights for a practice exercise.

        Alternates are excluded until the primary variant reaches the
        minimum exposure threshold, then gain weight linearly up to 1.0.
        The primary keeps a strong preference until it graduates.
        """
        primary = group.primary_entity
        if primary is None:
            return [], []

        cfg = self.config
        primary_mastery = primary.mastery

        if primary_mastery < cfg.graduation_threshold:
            primary_weight = max(cfg.primary_floor_weight, 1.0 - primary_mastery / 200.0)
        else:
            primary_weight = cfg.primary_floor_weight

        items = [primary]
        weights = [primary_weight]

        if primary_mastery >= cfg.min_exposure_threshold:
            span = 100.0 - cfg.min_exposure_threshold
            factor = (primary_mastery - cfg.min_exposure_threshold) / span if span > 0 else 1.0
            factor = min(1.0, max(0.0, factor))
            alternate_weight = cfg.alternate_base_weight + (1.0 - cfg.alternate_base_weight) * factor
            for alternate in group.alternates:
                items.append(alternate)
                weights.append(alternate_weight)

        return items, weights

    def select_entity(self, group: ConceptGroup, kind: ExerciseKind) -> MasteryEntity:
        """Pick the representation variant for the unit."""
        primary = group.primary_entity
        if kind is ExerciseKind.INTRODUCTION:
            return primary

        items, weights = self.variant_weights(group)
        chosen = select_weighted(items, weights, self.rng)
        return chosen if chosen is not None else group.entities[0]


def _earliest(groups: list[ConceptGroup]) -> ConceptGroup:
    # sorted() is stable, so equal labels keep their set order
    return sorted(groups, key=lambda group: group.label)[0]


def advance(
    practice_set: PracticeSet,
    config: Optional[SchedulerConfig] = None,
    rng: Optional[random.Random] = None,
) -> Optional[PracticeUnit]:
    """
    Compute the next practice unit for a set.

    Convenience wrapper around PracticeScheduler for one-off calls.
    """
    return PracticeScheduler(config=config, rng=rng).advance(practice_set)
