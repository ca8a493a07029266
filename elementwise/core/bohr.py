"""
Bohr diagram geometry.

Computes the nucleus, orbit rings, and electron coordinates for a Bohr
atomic-structure diagram on a square canvas. The layout is deterministic
for a given occupancy list and canvas size: electrons start at the top of
each ring (-90°) and are spaced evenly clockwise, so the compact
comparison view and the full detail view agree at every scale.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from elementwise.core.elements import Element

NUCLEUS_FRACTION = 0.08
NUCLEUS_MIN_RADIUS = 12.0
ELECTRON_FRACTION = 0.018
ELECTRON_MIN_RADIUS = 3.0
SHELL_GAP = 12.0  # nucleus edge to innermost ring
EDGE_MARGIN = 4.0  # outermost electron to canvas edge

Point = tuple[float, float]


@dataclass(frozen=True)
class BohrLayout:
    """Render-ready geometry for one diagram."""

    size: float
    center: Point
    nucleus_radius: float
    electron_radius: float
    shell_radii: list[float] = field(default_factory=list)
    electron_positions: list[list[Point]] = field(default_factory=list)

    @property
    def shell_count(self) -> int:
        return len(self.shell_radii)

    @property
    def electron_count(self) -> int:
        return sum(len(shell) for shell in self.electron_positions)


def shell_radii(shell_count: int, size: float) -> list[float]:
    """Equally spaced ring radii between the innermost and outermost orbit."""
    if shell_count <= 0:
        return []

    nucleus_radius = max(size * NUCLEUS_FRACTION, NUCLEUS_MIN_RADIUS)
    electron_radius = max(size * ELECTRON_FRACTION, ELECTRON_MIN_RADIUS)
    innermost = nucleus_radius + SHELL_GAP
    outermost = size / 2 - electron_radius - EDGE_MARGIN

    spacing = (outermost - innermost) / (shell_count - 1) if shell_count > 1 else 0.0
    return [innermost + spacing * i for i in range(shell_count)]


def electron_angles(count: int) -> list[float]:
    """Angles (radians) for ``count`` electrons, starting at the top."""
    if count <= 0:
        return []
    step = 2 * math.pi / count
    return [i * step - math.pi / 2 for i in range(count)]


def layout(shells: Sequence[int], size: float) -> BohrLayout:
    """
    Compute the Bohr diagram for a shell occupancy list.

    Args:
        shells: Electrons per shell, innermost first
        size: Canvas width and height

    Returns:
        BohrLayout; an empty occupancy list yields a bare nucleus and a
        zero-occupancy shell keeps its ring with no electrons
    """
    center = (size / 2, size / 2)
    nucleus_radius = max(size * NUCLEUS_FRACTION, NUCLEUS_MIN_RADIUS)
    electron_radius = max(size * ELECTRON_FRACTION, ELECTRON_MIN_RADIUS)
    radii = shell_radii(len(shells), size)

    positions: list[list[Point]] = []
    for radius, count in zip(radii, shells):
        positions.append([
            (center[0] + radius * math.cos(angle), center[1] + radius * math.sin(angle))
            for angle in electron_angles(count)
        ])

    return BohrLayout(
        size=size,
        center=center,
        nucleus_radius=nucleus_radius,
        electron_radius=electron_radius,
        shell_radii=radii,
        electron_positions=positions,
    )


def element_layout(element: Element, size: float) -> BohrLayout:
    """Shortcut for ``layout(element.shells, size)``."""
    return layout(element.shells, size)


def nucleon_counts(element: Element) -> tuple[int, int]:
    """Protons and neutrons of the most common isotope (mass rounded)."""
    protons = element.number
    neutrons = max(0, round(element.atomic_mass) - protons)
    return protons, neutrons
