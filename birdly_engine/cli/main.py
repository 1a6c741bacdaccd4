"""
birdly-engine developer CLI.

Usage:
    birdly-engine simulate              # Run the scheduler against a synthetic learner
    birdly-engine simulate -n 200 -a 0.6
    birdly-engine wordsearch "Blue Tit" # Preview a generated puzzle
    birdly-engine settings              # Show effective configuration
"""

from __future__ import annotations

import random
import sys
from collections import Counter
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from birdly_engine import __version__
from birdly_engine.config import get_settings
from birdly_engine.core.exercise import ExerciseKind
from birdly_engine.core.mastery import ConceptGroup, MasteryEntity, PracticeSet
from birdly_engine.puzzles.grid_generator import WordSearchGridGenerator
from birdly_engine.study.mastery_update import MasteryUpdateRule, record_attempt
from birdly_engine.study.scheduler import PracticeScheduler

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="birdly-engine",
    help="birdly practice engine - scheduler simulation and word-search preview",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

SAMPLE_BIRDS = [
    "Robin",
    "Blue Tit",
    "Blackbird",
    "Wren",
    "Magpie",
    "Goldfinch",
    "Chaffinch",
    "House Sparrow",
    "Starling",
    "Great Tit",
]

ALTERNATE_VARIANTS = ["flight_side", "flight_underbelly", "juvenile"]


def _format_progress_bar(score: float, width: int = 10) -> str:
    """Format a progress bar."""
    filled = int(score / 100 * width)
    empty = width - filled
    return "#" * filled + "-" * empty


def _build_practice_set(groups: int, variants: int, primary_variant: str) -> PracticeSet:
    """Synthetic practice set of sample birds, all unseen."""
    concept_groups = []
    for index in range(groups):
        base = SAMPLE_BIRDS[index % len(SAMPLE_BIRDS)]
        label = base if index < len(SAMPLE_BIRDS) else f"{base} {index // len(SAMPLE_BIRDS) + 1}"
        entities = [MasteryEntity(variant=primary_variant)]
        for alt in range(variants - 1):
            entities.append(MasteryEntity(variant=ALTERNATE_VARIANTS[alt % len(ALTERNATE_VARIANTS)]))
        concept_groups.append(
            ConceptGroup(label=label, entities=entities, primary_variant=primary_variant)
        )
    return PracticeSet(groups=concept_groups, title="Garden Birds")


# =============================================================================
# Commands
# =============================================================================


@app.command()
def simulate(
    groups: Annotated[int, typer.Option("--groups", "-g", min=1, help="Number of birds")] = 5,
    variants: Annotated[int, typer.Option("--variants", "-v", min=1, help="Images per bird")] = 2,
    steps: Annotated[int, typer.Option("--steps", "-n", min=1, help="Attempts to simulate")] = 100,
    accuracy: Annotated[
        float, typer.Option("--accuracy", "-a", min=0.0, max=1.0, help="Chance each answer is correct")
    ] = 0.8,
    seed: Annotated[Optional[int], typer.Option("--seed", help="Random seed")] = None,
) -> None:
    """
    Simulate a learner practicing a synthetic set.

    Shows how often each exercise kind was scheduled and the final mastery
    per bird.
    """
    settings = get_settings()
    rng = random.Random(seed)
    practice_set = _build_practice_set(groups, variants, settings.primary_variant)
    scheduler = PracticeScheduler(rng=rng)
    rule = MasteryUpdateRule(rng=rng)

    kind_counts: Counter[ExerciseKind] = Counter()
    for _ in range(steps):
        unit = scheduler.advance(practice_set)
        if unit is None:
            break
        kind_counts[unit.kind] += 1
        record_attempt(unit.entity, unit.kind, rng.random() < accuracy, rule=rule)

    kinds = Table(title="Scheduled Exercises")
    kinds.add_column("Kind", style="cyan")
    kinds.add_column("Count", justify="right")
    kinds.add_column("Share", justify="right")
    total = sum(kind_counts.values()) or 1
    for kind in ExerciseKind:
        count = kind_counts.get(kind, 0)
        kinds.add_row(kind.display_name, str(count), f"{count / total:.0%}")
    console.print(kinds)

    birds = Table(title=f"{practice_set.title} after {steps} attempts")
    birds.add_column("Bird")
    birds.add_column("Mastery", justify="right")
    birds.add_column("Progress")
    birds.add_column("Level")
    for group in practice_set.groups:
        level = group.level
        birds.add_row(
            group.label,
            f"{group.aggregate_mastery:.0f}%",
            _format_progress_bar(group.aggregate_mastery),
            f"[{level.color}]{level.display_name}[/{level.color}]",
        )
    console.print(birds)
    console.print(f"Set progress: [bold]{practice_set.progress:.0%}[/bold]")


@app.command()
def wordsearch(
    word: Annotated[str, typer.Argument(help="Word to hide")],
    max_size: Annotated[Optional[int], typer.Option("--max-size", "-m", min=1, help="Largest grid edge")] = None,
    attempts: Annotated[Optional[int], typer.Option("--attempts", min=1, help="Search restarts per size")] = None,
    seed: Annotated[Optional[int], typer.Option("--seed", help="Random seed")] = None,
) -> None:
    """
    Generate a word-search puzzle and highlight the hidden path.
    """
    generator = WordSearchGridGenerator.from_settings(rng=random.Random(seed))
    if max_size is not None:
        generator.max_grid_size = max_size
    if attempts is not None:
        generator.attempts_per_size = attempts

    puzzle = generator.generate(word)
    if puzzle is None:
        console.print(f"[red]Could not build a puzzle for '{word}'[/red]")
        raise typer.Exit(code=1)

    hidden = set(puzzle.path)
    content = Text()
    for row_index, row in enumerate(puzzle.grid):
        for col_index, char in enumerate(row):
            style = "bold green" if (row_index, col_index) in hidden else "dim"
            content.append(f"{char} ", style=style)
        content.append("\n")

    console.print(
        Panel(
            content,
            title=f"[bold]{puzzle.word}[/bold] ({puzzle.size}x{puzzle.size})",
            border_style="blue",
        )
    )


@app.command("settings")
def show_settings() -> None:
    """Show the effective engine configuration."""
    settings = get_settings()
    table = Table(title=f"birdly-engine {__version__}")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for name, value in settings.model_dump().items():
        table.add_row(name, str(value))
    console.print(table)


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """CLI entry point."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=get_settings().log_level.upper(),
        format="<level>{message}</level>",
    )

    app()


if __name__ == "__main__":
    main()
