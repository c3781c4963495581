"""A forest of trees whose children are lists of the same tree type."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Tree:
    label: str
    children: list[Tree] = field(default_factory=list)


@dataclass
class Forest:
    trees: list[Tree] = field(default_factory=list)
    by_region: dict[str, list[Tree]] = field(default_factory=dict)


@dataclass
class Leaf:
    colour: str
