"""
Exercise content builders.

UI-independent setup logic for the practice exercises:
- Multiple choice: correct group plus one introduced distractor
- True/false: a label that may or may not match the shown variant
- Letter selection: spell the label one letter at a time
"""
from __future__ import annotations

import random
import string
from dataclasses import dataclass, field
from typing import Optional

from birdly_engine.config import get_settings
from birdly_engine.core.mastery import ConceptGroup, PracticeSet

DEFAULT_OPTION_COUNT = 4

@dataclass(frozen=True)
class TrueFalsePrompt:
    """Label shown to the learner and whether it names the shown group."""
    label: str
    is_match: bool


def _distractors(group: ConceptGroup, practice_set: PracticeSet) -> list[ConceptGroup]:
    # Only already introduced groups make fair distractors
    return [
        other for other in practice_set.groups
        if other.id != group.id and not other.is_new
    ]


def multiple_choice_options(
    group: ConceptGroup,
    practice_set: PracticeSet,
    rng: Optional[random.Random] = None,
) -> list[ConceptGroup]:
    """
    Build the answer options for a multiple-choice exercise.

    Returns:
        Correct group and one random introduced distractor in random order,
        or just the correct group when no distractor exists
    """
    rng = rng or random.Random()
    others = _distractors(group, practice_set)
    if not others:
        return [group]

    options = [group, rng.choice(others)]
    rng.shuffle(options)
    return options


def true_false_prompt(
    group: ConceptGroup,
    practice_set: PracticeSet,
    rng: Optional[random.Random] = None,
) -> TrueFalsePrompt:
    """
    Build a true/false prompt: half the time the real label, otherwise a
    distractor's. Without distractors the real label is always shown.
    """
    rng = rng or random.Random()
    if rng.random() < 0.5:
        return TrueFalsePrompt(label=group.label, is_match=True)

    others = _distractors(group, practice_set)
    if not others:
        return TrueFalsePrompt(label=group.label, is_match=True)
    return TrueFalsePrompt(label=rng.choice(others).label, is_match=False)


def letter_options(
    target: str,
    position: int,
    rng: Optional[random.Random] = None,
    option_count: int = DEFAULT_OPTION_COUNT,
    alphabet: str = string.ascii_uppercase,
) -> list[str]:
    """
    Letter choices for one position of a letter-selection exercise.

    Args:
        target: Normalized (uppercase) answer
        position: Index of the letter being asked for
        rng: Random source
        option_count: Total options including the correct letter
        alphabet: Pool of distractor letters

    Returns:
        Shuffled list of distinct letters containing the correct one
    """
    rng = rng or random.Random()
    correct = target[position]
    pool = [letter for letter in dict.fromkeys(alphabet) if letter != correct]
    count = max(0, min(option_count - 1, len(pool)))

    options = [correct, *rng.sample(pool, count)]
    rng.shuffle(options)
    return options


@dataclass
class LetterSelectionRound:
    """
    State of one letter-selection exercise.

    Spaces are filled automatically; the round is lost after
    ``max_incorrect`` wrong letters.
    """
    answer: str
    max_incorrect: int = field(default_factory=lambda: get_settings().max_incorrect_attempts)
    filled: list[Optional[str]] = field(init=False, default_factory=list)
    position: int = field(init=False, default=0)
    incorrect_attempts: int = field(init=False, default=0)

    def __post_init__(self):
        self.answer = self.answer.upper()
        self.filled = [" " if char == " " else None for char in self.answer]
        self._skip_filled()

    def _skip_filled(self) -> None:
        while self.position < len(self.answer) and self.filled[self.position] is not None:
            self.position += 1

    @property
    def is_won(self) -> bool:
        return self.position >= len(self.answer)

    @property
    def is_lost(self) -> bool:
        return self.incorrect_attempts >= self.max_incorrect

    @property
    def is_over(self) -> bool:
        return self.is_won or self.is_lost

    @property
    def expected_letter(self) -> Optional[str]:
        if self.is_won:
            return None
        return self.answer[self.position]

    def options(self, rng: Optional[random.Random] = None) -> list[str]:
        """Letter choices for the current position."""
        if self.is_won:
            return []
        return letter_options(self.answer, self.position, rng)

    def choose(self, letter: str) -> bool:
        """
        Submit a letter for the current position.

        Returns:
            True when the letter was correct
        """
        if self.is_over:
            return False

        if letter.upper() == self.answer[self.position]:
            self.filled[self.position] = self.answer[self.position]
            self.position += 1
            self._skip_filled()
            return True

        self.incorrect_attempts += 1
        return False
