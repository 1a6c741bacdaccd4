"""
Study Module - Practice scheduling and mastery updates.

Components:
- scheduler: PracticeScheduler deciding the next practice unit
- mastery_update: MasteryUpdateRule and record_attempt
- exercises: Content builders for the practice exercises
"""

from birdly_engine.study.exercises import (
    LetterSelectionRound,
    TrueFalsePrompt,
    letter_options,
    multiple_choice_options,
    true_false_prompt,
)
from birdly_engine.study.mastery_update import (
    MasteryUpdateConfig,
    MasteryUpdateRule,
    record_attempt,
)
from birdly_engine.study.scheduler import (
    PracticeScheduler,
    PracticeUnit,
    SchedulerConfig,
    advance,
)

__all__ = [
    "PracticeScheduler",
    "PracticeUnit",
    "SchedulerConfig",
    "advance",
    "MasteryUpdateConfig",
    "MasteryUpdateRule",
    "record_attempt",
    "LetterSelectionRound",
    "TrueFalsePrompt",
    "letter_options",
    "multiple_choice_options",
    "true_false_prompt",
]
