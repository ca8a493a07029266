"""
ElementWise Visual Components.

Rich renderables for the terminal front end: the periodic table grid,
element detail and comparison views, and the themed panels used by the
learning modes. Everything here consumes engine state; nothing feeds back.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich import box
from rich.align import Align
from rich.console import Group
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from elementwise.core.bohr import BohrLayout, element_layout, nucleon_counts
from elementwise.core.elements import Category, Element, describe, format_ion, ion_polarity
from elementwise.core.filters import TableFilter, TableStats, grid
from elementwise.core.phase import Phase, classify
from elementwise.core.trends import UNDEFINED, TrendKind, intensity, raw_value, trend_opacity
from elementwise.study.flashcards import FlashcardDeck
from elementwise.study.memory import MemoryGame
from elementwise.study.quiz import AnswerResult, Question, QuizStats
from elementwise.study.selection import comparison_rows

# =============================================================================
# COLOR THEME
# =============================================================================

THEME = {
    "primary": "#38BDF8",  # Sky - main accent
    "secondary": "#A78BFA",  # Violet - secondary accent
    "accent": "#F472B6",  # Pink - highlights
    "background": "#0F172A",  # Slate - cell fade target
    "success": "#22C55E",  # Green - correct answers
    "warning": "#FACC15",  # Yellow - hints
    "error": "#EF4444",  # Red - incorrect
    "dim": "#64748B",  # Slate gray - secondary text
    "white": "#F1F5F9",  # Primary text
}

STYLES = {
    "primary": Style(color=THEME["primary"], bold=True),
    "secondary": Style(color=THEME["secondary"]),
    "accent": Style(color=THEME["accent"], bold=True),
    "success": Style(color=THEME["success"], bold=True),
    "warning": Style(color=THEME["warning"], bold=True),
    "error": Style(color=THEME["error"], bold=True),
    "dim": Style(color=THEME["dim"]),
}

CATEGORY_COLORS = {
    Category.ALKALI_METAL: "#F87171",
    Category.ALKALINE_EARTH_METAL: "#FB923C",
    Category.TRANSITION_METAL: "#FBBF24",
    Category.POST_TRANSITION_METAL: "#4ADE80",
    Category.METALLOID: "#2DD4BF",
    Category.NONMETAL: "#60A5FA",
    Category.HALOGEN: "#818CF8",
    Category.NOBLE_GAS: "#C084FC",
    Category.LANTHANIDE: "#F472B6",
    Category.ACTINIDE: "#FB7185",
}

ION_COLORS = {
    "positive": THEME["error"],
    "negative": THEME["primary"],
    "neutral": THEME["dim"],
}


def _hex_to_rgb(color: str) -> tuple[int, int, int]:
    color = color.lstrip("#")
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)


def blend(low: str, high: str, weight: float) -> str:
    """Linear interpolation between two hex colors."""
    weight = min(max(weight, 0.0), 1.0)
    a, b = _hex_to_rgb(low), _hex_to_rgb(high)
    mixed = tuple(round(x + (y - x) * weight) for x, y in zip(a, b))
    return "#{:02X}{:02X}{:02X}".format(*mixed)


# =============================================================================
# PERIODIC TABLE
# =============================================================================


def _trend_color(element: Element, trend: TrendKind) -> str:
    low, high = trend.gradient
    weight = intensity(element, trend)
    base = THEME["dim"] if weight is UNDEFINED else blend(low, high, weight)
    # Fade toward the background by the cell's render weight
    return blend(THEME["background"], base, trend_opacity(element, trend))


def _cell(
    element: Element,
    temperature_k: float,
    trend: TrendKind | None,
    highlighted: bool,
    show_ions: bool,
) -> Text:
    if not highlighted:
        return Text(f"{element.symbol:<3}", style=STYLES["dim"])

    if trend is not None:
        color = _trend_color(element, trend)
        return Text(f"{element.symbol:<3}", style=Style(color=color, bold=True))

    text = Text()
    text.append(f"{element.symbol:<2}", style=Style(color=CATEGORY_COLORS[element.category], bold=True))
    if show_ions and element.primary_ion:
        polarity = ion_polarity(element.primary_ion)
        text.append(element.primary_ion[0], style=Style(color=ION_COLORS[polarity]))
    else:
        phase = classify(element, temperature_k)
        text.append(phase.marker, style=Style(color=phase.color))
    return text


def render_periodic_table(
    elements: Iterable[Element],
    temperature_k: float = 298.0,
    trend: TrendKind | None = None,
    table_filter: TableFilter | None = None,
    show_ions: bool = False,
) -> Table:
    """
    Render the 18-column table with the f-block below the main body.

    Args:
        elements: Elements to place (positions come from the records)
        temperature_k: Temperature for the state markers
        trend: Shade cells by trend weight instead of category
        table_filter: Cells failing the filter are dimmed
        show_ions: Show the primary ion sign instead of the state marker

    Returns:
        Rich Table
    """
    table_filter = table_filter or TableFilter()
    cells = grid(elements)

    table = Table(box=box.SIMPLE, show_header=True, header_style=STYLES["dim"], padding=(0, 0))
    table.add_column("", style=STYLES["dim"], justify="right", width=2)
    for column in range(1, 19):
        table.add_column(str(column), justify="center", width=3)

    rows = sorted({y for _, y in cells})
    for row in rows:
        label = str(row) if row <= 7 else ""
        values: list[Text | str] = []
        for column in range(1, 19):
            element = cells.get((column, row))
            if element is None:
                values.append("")
                continue
            highlighted = table_filter.matches(element)
            values.append(_cell(element, temperature_k, trend, highlighted, show_ions))
        if row == 9:
            table.add_row(*[""] * 19)
        table.add_row(label, *values)

    return table


def render_table_legend(trend: TrendKind | None, temperature_k: float) -> Text:
    text = Text()
    if trend is not None:
        low, high = trend.gradient
        text.append(f"{trend.label}", style=STYLES["primary"])
        if trend.unit:
            text.append(f" ({trend.unit})", style=STYLES["dim"])
        text.append("  low ", style=STYLES["dim"])
        text.append("███", style=Style(color=low))
        text.append(" → ", style=STYLES["dim"])
        text.append("███", style=Style(color=high))
        text.append(" high\n", style=STYLES["dim"])
        text.append(trend.description, style=STYLES["dim"])
        return text

    text.append(f"State at {temperature_k:g} K  ", style=STYLES["primary"])
    for phase in (Phase.SOLID, Phase.LIQUID, Phase.GAS):
        text.append(f"{phase.marker} {phase.value}  ", style=Style(color=phase.color))
    text.append("\n")
    for category, color in CATEGORY_COLORS.items():
        text.append("■ ", style=Style(color=color))
        text.append(f"{category.display_name}  ", style=STYLES["dim"])
    return text


def render_stats_panel(stats: TableStats) -> Panel:
    """Quick stats shown above the table (room temperature)."""
    text = Text()
    text.append(f"{stats.total} elements", style=STYLES["primary"])
    text.append(f"   {Phase.SOLID.marker} {stats.solids} solid", style=Style(color=Phase.SOLID.color))
    text.append(f"   {Phase.LIQUID.marker} {stats.liquids} liquid", style=Style(color=Phase.LIQUID.color))
    text.append(f"   {Phase.GAS.marker} {stats.gases} gas", style=Style(color=Phase.GAS.color))
    return Panel(
        text,
        title="[bold]At 298 K[/bold]",
        border_style=Style(color=THEME["accent"]),
        box=box.ROUNDED,
        padding=(0, 1),
    )


# =============================================================================
# ELEMENT DETAIL
# =============================================================================


def render_bohr_summary(diagram: BohrLayout) -> Text:
    """Ring-by-ring description of a Bohr layout."""
    text = Text()
    text.append(f"Canvas {diagram.size:g}  ", style=STYLES["dim"])
    text.append(f"nucleus r={diagram.nucleus_radius:.1f}  ", style=STYLES["accent"])
    text.append(f"electron r={diagram.electron_radius:.1f}\n", style=STYLES["dim"])
    for index, (radius, positions) in enumerate(zip(diagram.shell_radii, diagram.electron_positions), 1):
        dots = "●" * len(positions)
        text.append(f"  n={index}  r={radius:6.1f}  ", style=STYLES["dim"])
        text.append(f"{len(positions):>2} ", style=STYLES["primary"])
        text.append(f"{dots}\n", style=STYLES["secondary"])
    if not diagram.shell_radii:
        text.append("  (no shells)\n", style=STYLES["dim"])
    return text


def _optional(value: float | int | None, unit: str = "", fmt: str = "{}") -> str:
    if value is None:
        return "N/A"
    text = fmt.format(value)
    return f"{text} {unit}".strip()


def render_element_panel(element: Element, temperature_k: float = 298.0, size: float = 200) -> Panel:
    """
    Full detail view for one element.

    Args:
        element: Element record
        temperature_k: Temperature for the state line
        size: Bohr canvas size

    Returns:
        Rich Panel
    """
    color = CATEGORY_COLORS[element.category]
    phase = classify(element, temperature_k)
    protons, neutrons = nucleon_counts(element)

    facts = Table(box=box.MINIMAL, show_header=False, padding=(0, 1))
    facts.add_column("Property", style=STYLES["dim"])
    facts.add_column("Value", style=Style(color=THEME["white"]))
    facts.add_row("Category", element.category.display_name)
    facts.add_row("Atomic mass", f"{element.atomic_mass:.3f} u")
    facts.add_row("Period / Group", f"{element.period} / {element.group}")
    facts.add_row(f"State at {temperature_k:g} K", Text(phase.value, style=Style(color=phase.color)))
    facts.add_row("Melting point", _optional(element.melt, "K", "{:.2f}"))
    facts.add_row("Boiling point", _optional(element.boil, "K", "{:.2f}"))
    for trend in TrendKind:
        facts.add_row(trend.label, _optional(raw_value(element, trend), trend.unit))
    facts.add_row("Configuration", element.electron_configuration or "N/A")
    facts.add_row("Nucleus", f"{protons} p+ / {neutrons} n")

    ions = Text()
    for charge in element.ion_charges or ():
        ions.append(format_ion(element.symbol, charge) + "  ", style=Style(color=ION_COLORS[ion_polarity(charge)]))
    if element.ion_charges:
        facts.add_row("Ions", ions)

    parts: list = [Text(describe(element) + "\n", style=Style(color=THEME["white"])), facts]
    if element.fun_fact:
        parts.append(Text(f"\n★ {element.fun_fact}", style=STYLES["warning"]))
    if element.uses:
        parts.append(Text("Uses: " + ", ".join(element.uses), style=STYLES["dim"]))
    if element.discovered_by:
        year = f" ({element.year_discovered})" if element.year_discovered else ""
        parts.append(Text(f"Discovered by {element.discovered_by}{year}", style=STYLES["dim"]))
    parts.append(Text("\nBohr model", style=STYLES["primary"]))
    parts.append(render_bohr_summary(element_layout(element, size)))

    title = Text()
    title.append(f"{element.number} ", style=STYLES["dim"])
    title.append(element.symbol, style=Style(color=color, bold=True))
    title.append(f"  {element.name}", style=Style(color=THEME["white"], bold=True))

    return Panel(
        Group(*parts),
        title=title,
        title_align="left",
        border_style=Style(color=color),
        box=box.HEAVY,
        padding=(1, 2),
    )


def render_comparison_table(elements: Iterable[Element]) -> Table:
    """Side-by-side comparison, columns in selection order."""
    selected = list(elements)
    table = Table(box=box.ROUNDED, header_style=STYLES["primary"])
    table.add_column("Property", style=STYLES["dim"])
    for element in selected:
        table.add_column(
            f"{element.symbol} - {element.name}",
            style=Style(color=CATEGORY_COLORS[element.category]),
            justify="center",
        )
    for row in comparison_rows(selected):
        table.add_row(row.label, *row.values)
    return table


# =============================================================================
# LEARNING MODES
# =============================================================================


def render_question_panel(question: Question, number: int | None = None) -> Panel:
    """
    Quiz prompt with numbered options.

    Args:
        question: Current quiz question
        number: Question counter shown in the title

    Returns:
        Rich Panel
    """
    color = question.difficulty.color

    header = Text()
    header.append(f"[{question.difficulty.value.upper()}]", style=Style(color=color, bold=True))
    if number:
        header.append(f" Question {number}", style=STYLES["dim"])

    options = Table(box=box.MINIMAL, show_header=False)
    options.add_column("Index", style="cyan", justify="right", width=4)
    options.add_column("Option", style="white")
    for index, option in enumerate(question.options, 1):
        options.add_row(f"[{index}]", question.option_label(option))

    body = Group(
        Text(question.prompt, style=STYLES["dim"]),
        Align.center(Text(question.content, style=STYLES["primary"])),
        options,
    )
    return Panel(
        body,
        title=header,
        title_align="left",
        border_style=Style(color=color),
        box=box.HEAVY,
        padding=(1, 2),
    )


def render_hint_panel(hint: str) -> Panel:
    return Panel(
        Text(hint, style=STYLES["warning"]),
        title="[bold]Hint[/bold]",
        border_style=Style(color=THEME["warning"]),
        box=box.ROUNDED,
        padding=(0, 1),
    )


def render_result_panel(result: AnswerResult) -> Panel:
    """
    Feedback after an answer.

    Args:
        result: Checked answer

    Returns:
        Rich Panel with success/error styling
    """
    color = THEME["success"] if result.correct else THEME["error"]
    icon = "◉" if result.correct else "✗"

    content = Text()
    content.append(f"{icon} {result.feedback}\n\n", style=Style(color=color, bold=True))
    if not result.correct:
        content.append("Your answer: ", style=STYLES["dim"])
        content.append(f"{result.user_answer}\n", style=Style(color=THEME["white"]))
    content.append("Answer: ", style=STYLES["dim"])
    content.append(result.correct_answer, style=Style(color=THEME["white"], bold=True))

    if result.explanation:
        content.append("\n\n")
        content.append(result.explanation, style=STYLES["dim"])

    return Panel(
        content,
        border_style=Style(color=color),
        box=box.HEAVY,
        padding=(1, 2),
    )


def render_quiz_stats(stats: QuizStats) -> Panel:
    text = Text()
    text.append(f"✓ {stats.correct}", style=STYLES["success"])
    text.append(f"  ✗ {stats.wrong}", style=STYLES["error"])
    text.append(f"\n{stats.accuracy:.0%} accuracy", style=STYLES["dim"])
    if stats.streak > 0:
        text.append(f"\n🔥 {stats.streak} streak", style=Style(color=THEME["warning"]))
    text.append(f"\nBest streak: {stats.best_streak}", style=STYLES["dim"])

    return Panel(
        text,
        title="[bold]Score[/bold]",
        border_style=Style(color=THEME["accent"]),
        box=box.ROUNDED,
        padding=(0, 1),
    )


def render_flashcard_panel(deck: FlashcardDeck) -> Panel:
    """Current card: symbol on the front, name and facts on the back."""
    card = deck.current
    if card is None:
        return Panel(Text("Deck is empty", style=STYLES["dim"]), box=box.ROUNDED)

    element = card.element
    color = CATEGORY_COLORS[element.category]
    if card.flipped:
        body = Text()
        body.append(f"{element.name}\n", style=Style(color=THEME["white"], bold=True))
        body.append(f"Atomic number {element.number}\n", style=STYLES["dim"])
        body.append(f"{element.category.display_name}\n", style=Style(color=color))
        body.append(f"{element.atomic_mass:.3f} u", style=STYLES["dim"])
    else:
        body = Text(element.symbol, style=Style(color=color, bold=True))

    return Panel(
        Align.center(body),
        title=f"[bold]Card {deck.position}[/bold]",
        subtitle="[dim]back[/dim]" if card.flipped else "[dim]front[/dim]",
        border_style=Style(color=color),
        box=box.HEAVY,
        padding=(2, 4),
    )


def render_memory_board(game: MemoryGame, columns: int = 4) -> Table:
    """Card grid; face-down cards show their id so they can be picked."""
    table = Table(box=box.ROUNDED, show_header=False, padding=(0, 1))
    for _ in range(columns):
        table.add_column(justify="center", width=14)

    row: list[Text] = []
    for card in game.cards:
        if card.matched:
            cell = Text(card.label, style=STYLES["success"])
        elif game.is_face_up(card):
            cell = Text(card.label, style=STYLES["warning"])
        else:
            cell = Text(f"#{card.id}", style=STYLES["dim"])
        row.append(cell)
        if len(row) == columns:
            table.add_row(*row)
            row = []
    if row:
        table.add_row(*row, *[""] * (columns - len(row)))

    table.caption = f"Moves: {game.moves}   Matches: {game.matches}/{game.pair_count}"
    return table
