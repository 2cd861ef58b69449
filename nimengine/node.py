"""Search tree node model."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(slots=True)
class SearchNode:
    stones: int
    is_maximizing: bool
    depth: int
    pruned: bool = False
    score: int = 0
    children: list[SearchNode] = field(default_factory=list)

    @classmethod
    def placeholder(cls, stones: int, is_maximizing: bool, depth: int) -> SearchNode:
        return cls(stones=stones, is_maximizing=is_maximizing, depth=depth, pruned=True)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def walk(self) -> Iterator[SearchNode]:
        """Yield this node and its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def size(self) -> int:
        return sum(1 for _ in self.walk())

    def visited(self) -> int:
        return sum(1 for node in self.walk() if not node.pruned)

    def to_dict(self) -> dict:
        return {
            "stones": self.stones,
            "is_maximizing": self.is_maximizing,
            "depth": self.depth,
            "pruned": self.pruned,
            "score": self.score,
            "children": [child.to_dict() for child in self.children],
        }

    def label(self) -> str:
        if self.pruned:
            return f"PRUNED {self.stones}"
        role = "MAX" if self.is_maximizing else "MIN"
        return f"{role} {self.stones} s:{self.score:+d}"

    def render(self, max_depth: int | None = None) -> str:
        lines: list[str] = []
        self._render_into(lines, "", "", max_depth)
        return "\n".join(lines)

    def _render_into(self, lines: list[str], indent: str, prefix: str, max_depth: int | None) -> None:
        lines.append(f"{indent}{prefix}{self.label()}")
        if max_depth is not None and self.depth >= max_depth:
            return
        for take, child in enumerate(self.children, start=1):
            child._render_into(lines, indent + "  ", f"-{take} ", max_depth)
