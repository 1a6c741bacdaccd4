"""
Mastery Update Rule.

Applies the outcome of one attempt to a variant's mastery:

- Correct answers gain more on harder exercises, with diminishing returns
  as mastery grows (scale falls from 1.0 at 0% to 0.6 at 100%)
- Wrong answers cost more on easier exercises
- Introductions only ever raise mastery to a bootstrap value

Mastery never exceeds 100 and, once introduced, never drops below 1.
"""
from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from birdly_engine.config import Settings, get_settings
from birdly_engine.core.exercise import ExerciseKind
from birdly_engine.core.mastery import MasteryEntity

MAX_MASTERY = 100.0


@dataclass
class MasteryUpdateConfig:
    """Tuning values for the update rule."""
    intro_bootstrap_mastery: float = 5.0
    penalty_floor: float = 1.0
    gain_min_base: float = 10.0
    gain_max_base: float = 15.0
    gain_difficulty_factor: float = 20.0
    min_gain_scale: float = 0.6
    gain_scale_decay: float = 0.4
    penalty_base: float = 5.0
    penalty_difficulty_factor: float = 2.0

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> MasteryUpdateConfig:
        settings = settings or get_settings()
        return cls(
            intro_bootstrap_mastery=settings.intro_bootstrap_mastery,
            penalty_floor=settings.penalty_floor,
            gain_min_base=settings.gain_min_base,
            gain_max_base=settings.gain_max_base,
            gain_difficulty_factor=settings.gain_difficulty_factor,
            min_gain_scale=settings.min_gain_scale,
            gain_scale_decay=settings.gain_scale_decay,
            penalty_base=settings.penalty_base,
            penalty_difficulty_factor=settings.penalty_difficulty_factor,
        )


class MasteryUpdateRule:
    """
    Asymmetric reward/penalty rule.

    Formula (d = exercise difficulty, m = current mastery):
        correct:   gain ~ U[(10 + 20d) * s, (15 + 20d) * s],
                   s = max(0.6, 1 - 0.4 * m / 100)
                   m' = min(100, m + gain)
        incorrect: m' = max(1, m - (5 - 2d))
    """

    def __init__(
        self,
        config: Optional[MasteryUpdateConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or MasteryUpdateConfig.from_settings()
        self.rng = rng or random.Random()

    def diminishing_scale(self, current: float) -> float:
        """Gain multiplier for the current mastery (1.0 down to 0.6)."""
        cfg = self.config
        return max(cfg.min_gain_scale, 1.0 - (current / MAX_MASTERY) * cfg.gain_scale_decay)

    def gain_range(self, kind: ExerciseKind, current: float) -> tuple[float, float]:
        """
        Bounds of the uniform gain draw for a correct answer.

        Args:
            kind: Exercise kind answered
            current: Mastery before the attempt

        Returns:
            Tuple of (min_gain, max_gain)
        """
        cfg = self.config
        scale = self.diminishing_scale(current)
        base_min = cfg.gain_min_base + kind.difficulty * cfg.gain_difficulty_factor
        base_max = cfg.gain_max_base + kind.difficulty * cfg.gain_difficulty_factor
        return base_min * scale, base_max * scale

    def penalty_at(self, difficulty: float) -> float:
        """Mastery lost on a wrong answer at the given difficulty (0-1)."""
        return self.config.penalty_base - difficulty * self.config.penalty_difficulty_factor

    def penalty_for(self, kind: ExerciseKind) -> float:
        """Mastery lost on a wrong answer; 0 for introductions."""
        if kind is ExerciseKind.INTRODUCTION:
            return 0.0
        return self.penalty_at(kind.difficulty)

    def next_mastery(self, current: float, kind: ExerciseKind, was_correct: bool) -> float:
        """
        Compute the mastery after an attempt without mutating anything.

        Args:
            current: Mastery before the attempt (0-100)
            kind: Exercise kind answered
            was_correct: Whether the answer was right

        Returns:
            New mastery in [penalty_floor, 100]
        """
        cfg = self.config

        if kind is ExerciseKind.INTRODUCTION:
            return min(MAX_MASTERY, max(current, cfg.intro_bootstrap_mastery))

        if was_correct:
            low, high = self.gain_range(kind, current)
            gain = self.rng.uniform(low, high)
            return min(MAX_MASTERY, max(cfg.penalty_floor, current + gain))

        return min(MAX_MASTERY, max(cfg.penalty_floor, current - self.penalty_for(kind)))

    def apply(self, entity: MasteryEntity, kind: ExerciseKind, was_correct: bool) -> float:
        """
        Apply an attempt to a variant in place.

        Returns:
            The variant's new mastery
        """
        old = entity.mastery
        entity.mastery = self.next_mastery(old, kind, was_correct)
        logger.debug(
            f"{kind.value} {'correct' if was_correct else 'incorrect'}: "
            f"variant {entity.variant} {old:.1f} -> {entity.mastery:.1f}"
        )
        return entity.mastery


def record_attempt(
    entity: MasteryEntity,
    kind: ExerciseKind,
    was_correct: bool,
    rule: Optional[MasteryUpdateRule] = None,
    on_update: Optional[Callable[[MasteryEntity], None]] = None,
) -> float:
    """
    Record an attempt and hand the updated variant to the storage hook.

    The hook is fire-and-forget: failures are logged and never reach the
    caller.

    Args:
        entity: Variant that was practiced
        kind: Exercise kind answered
        was_correct: Whether the answer was right
        rule: Update rule (defaults to one built from settings)
        on_update: Optional persistence callback

    Returns:
        Updated mastery
    """
    rule = rule or MasteryUpdateRule()
    mastery = rule.apply(entity, kind, was_correct)

    if on_update is not None:
        try:
            on_update(entity)
        except Exception:
            logger.exception(f"Failed to persist mastery for variant {entity.id}")

    return mastery
