"""
ElementWise CLI - periodic table explorer and chemistry study companion.

Usage:
    elementwise table                      # State of matter at 298 K
    elementwise table --temp 1200          # ...at any temperature
    elementwise table --trend atomic_radius
    elementwise element Na                 # Detail view with Bohr model
    elementwise compare Na K Rb Cs         # Side-by-side comparison
    elementwise quiz --difficulty medium   # Multiple-choice quiz
    elementwise flashcards                 # Flip through a deck
    elementwise memory --pairs 4           # Symbol/name matching game
"""

from __future__ import annotations

import sys
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.prompt import Prompt

from elementwise.config import get_settings
from elementwise.core.catalog import CatalogError, ElementCatalog, default_catalog
from elementwise.core.difficulty import Difficulty
from elementwise.core.elements import Category, Element
from elementwise.core.filters import TableFilter, table_stats
from elementwise.core.phase import Phase
from elementwise.core.randomness import make_rng
from elementwise.core.trends import TrendKind
from elementwise.delivery.visuals import (
    render_comparison_table,
    render_element_panel,
    render_flashcard_panel,
    render_hint_panel,
    render_memory_board,
    render_periodic_table,
    render_question_panel,
    render_quiz_stats,
    render_result_panel,
    render_stats_panel,
    render_table_legend,
)
from elementwise.study.flashcards import FlashcardDeck
from elementwise.study.memory import ManualScheduler, MemoryGame
from elementwise.study.quiz import QuestionGenerator, QuizSession
from elementwise.study.selection import SelectionSet

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="elementwise",
    help="⚛ ElementWise - interactive periodic table and chemistry learning",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def _load_catalog() -> ElementCatalog:
    """Load the shared catalog or exit with a readable error."""
    try:
        return default_catalog()
    except CatalogError as exc:
        console.print(f"[red]Could not load element data:[/red] {exc}")
        raise typer.Exit(code=1)


def _resolve(catalog: ElementCatalog, query: str) -> Element:
    try:
        return catalog.resolve(query)
    except KeyError:
        console.print(f"[red]Unknown element:[/red] {query}")
        raise typer.Exit(code=1)


def _parse_category(value: str | None) -> Category | None:
    if value is None:
        return None
    key = value.strip().lower().replace("_", " ")
    try:
        return Category(key)
    except ValueError:
        choices = ", ".join(c.value for c in Category)
        console.print(f"[red]Unknown category:[/red] {value} [dim](choose from: {choices})[/dim]")
        raise typer.Exit(code=1)


def _difficulty(value: Difficulty | None) -> Difficulty:
    return value or Difficulty.parse(get_settings().quiz_default_difficulty)


def _seed(value: int | None) -> int | None:
    return value if value is not None else get_settings().random_seed


# =============================================================================
# Periodic Table Commands
# =============================================================================


@app.command()
def table(
    temp: Annotated[
        float | None, typer.Option("--temp", "-t", help="Temperature in kelvin for the state view")
    ] = None,
    trend: Annotated[
        TrendKind | None, typer.Option("--trend", help="Shade cells by a periodic trend")
    ] = None,
    search: Annotated[
        str, typer.Option("--search", "-s", help="Name, symbol, or atomic number")
    ] = "",
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Only highlight one family")
    ] = None,
    state: Annotated[
        Phase | None, typer.Option("--state", help="Only highlight one state at 298 K")
    ] = None,
    ions: Annotated[
        bool, typer.Option("--ions", help="Show the primary ion sign in each cell")
    ] = False,
) -> None:
    """
    Show the periodic table.

    Examples:
        elementwise table --temp 3000
        elementwise table --trend electronegativity
        elementwise table --category halogen
    """
    catalog = _load_catalog()
    temperature = temp if temp is not None else get_settings().default_temperature_k
    table_filter = TableFilter(search=search, category=_parse_category(category), state=state)

    console.print(render_stats_panel(table_stats(catalog, table_filter)))
    console.print(render_periodic_table(catalog, temperature, trend, table_filter, show_ions=ions))
    console.print(render_table_legend(trend, temperature))


@app.command()
def element(
    query: Annotated[str, typer.Argument(help="Atomic number, symbol, or name")],
    size: Annotated[
        int | None, typer.Option("--size", help="Bohr diagram canvas size")
    ] = None,
    temp: Annotated[
        float | None, typer.Option("--temp", "-t", help="Temperature in kelvin for the state line")
    ] = None,
) -> None:
    """Show the detail view of one element."""
    settings = get_settings()
    catalog = _load_catalog()
    record = _resolve(catalog, query)
    console.print(
        render_element_panel(
            record,
            temp if temp is not None else settings.default_temperature_k,
            size or settings.bohr_canvas_size,
        )
    )


@app.command()
def compare(
    queries: Annotated[list[str], typer.Argument(help="Elements to compare")],
) -> None:
    """
    Compare elements side by side.

    Only the first few distinct elements fit in the comparison; the rest
    are reported and ignored.
    """
    catalog = _load_catalog()
    selection = SelectionSet(max_size=get_settings().max_compare)

    for query in queries:
        record = _resolve(catalog, query)
        if record in selection:
            console.print(f"[dim]{record.symbol} already selected[/dim]")
            continue
        if not selection.toggle(record):
            console.print(
                f"[yellow]Comparison is full ({selection.max_size}); ignoring {record.symbol}[/yellow]"
            )

    console.print(render_comparison_table(selection))


# =============================================================================
# Study Commands
# =============================================================================


@app.command()
def quiz(
    difficulty: Annotated[
        Difficulty | None, typer.Option("--difficulty", "-d", help="easy, medium, or hard")
    ] = None,
    rounds: Annotated[
        int, typer.Option("--rounds", "-n", min=1, help="Number of questions")
    ] = 10,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Seed for a reproducible quiz")
    ] = None,
) -> None:
    """
    Multiple-choice element quiz.

    Enter an option number, 'h' for a hint, or 'q' to stop.
    """
    catalog = _load_catalog()
    session = QuizSession(QuestionGenerator(catalog, rng=make_rng(_seed(seed))), _difficulty(difficulty))

    for number in range(1, rounds + 1):
        question = session.question if number == 1 else session.next()
        console.print(render_question_panel(question, number))

        choice = None
        while choice is None:
            raw = Prompt.ask(f"Answer [1-{len(question.options)}]").strip().lower()
            if raw == "q":
                console.print(render_quiz_stats(session.stats))
                return
            if raw == "h":
                console.print(render_hint_panel(question.hint))
                continue
            if raw.isdigit() and 1 <= int(raw) <= len(question.options):
                choice = question.options[int(raw) - 1]
            else:
                console.print("[dim]Enter an option number, 'h' or 'q'[/dim]")

        console.print(render_result_panel(session.answer(choice)))

    console.print(render_quiz_stats(session.stats))


@app.command()
def flashcards(
    difficulty: Annotated[
        Difficulty | None, typer.Option("--difficulty", "-d", help="easy, medium, or hard")
    ] = None,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Seed for a reproducible deck")
    ] = None,
) -> None:
    """
    Flip through a shuffled flashcard deck.

    Keys: n=next, p=previous, f=flip, s=shuffle, q=quit
    """
    catalog = _load_catalog()
    deck = FlashcardDeck(catalog, rng=make_rng(_seed(seed)), size=get_settings().flashcard_deck_size)
    deck.shuffle_new(_difficulty(difficulty))

    while True:
        console.print(render_flashcard_panel(deck))
        key = Prompt.ask("(n)ext (p)rev (f)lip (s)huffle (q)uit", default="f").strip().lower()
        if key == "q":
            return
        if key == "n":
            deck.advance(1)
        elif key == "p":
            deck.advance(-1)
        elif key == "f":
            deck.flip_current()
        elif key == "s":
            deck.shuffle_new()


@app.command()
def memory(
    difficulty: Annotated[
        Difficulty | None, typer.Option("--difficulty", "-d", help="easy, medium, or hard")
    ] = None,
    pairs: Annotated[
        int | None, typer.Option("--pairs", "-p", min=1, help="Number of pairs to deal")
    ] = None,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Seed for a reproducible deal")
    ] = None,
) -> None:
    """
    Match each element symbol with its name.

    Enter a card id to flip it, 'r' to redeal, or 'q' to quit.
    """
    settings = get_settings()
    catalog = _load_catalog()
    scheduler = ManualScheduler()
    game = MemoryGame(
        catalog,
        rng=make_rng(_seed(seed)),
        scheduler=scheduler,
        pairs=pairs or settings.memory_pairs,
        match_delay=settings.memory_match_delay_s,
        mismatch_delay=settings.memory_mismatch_delay_s,
    )
    game.new_game(_difficulty(difficulty))

    while not game.is_complete:
        console.print(render_memory_board(game))
        raw = Prompt.ask("Card").strip().lower()
        if raw == "q":
            return
        if raw == "r":
            game.new_game()
            continue
        if not raw.lstrip("#").isdigit() or not game.flip(int(raw.lstrip("#"))):
            console.print("[dim]Pick a face-down card id[/dim]")
            continue
        if len(game.revealed) == 2:
            # Show the pair, then let the reveal delay elapse
            console.print(render_memory_board(game))
            scheduler.run_pending()

    console.print(render_memory_board(game))
    console.print(f"[bold green]All pairs matched in {game.moves} moves![/bold green]")


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """CLI entry point."""
    settings = get_settings()
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        format="<level>{message}</level>",
    )

    app()


if __name__ == "__main__":
    main()
