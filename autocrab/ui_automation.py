"""UI element trees and their compact text rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

Rect = tuple[int, int, int, int]

_MAX_NAME_CHARS = 50
_TRUNCATED_NAME_CHARS = 47


@dataclass
class UiNode:
    """One accessible UI element and its children."""

    role: str
    name: str
    rect: Optional[Rect] = None
    states: list[str] = field(default_factory=list)
    children: list["UiNode"] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role,
            "name": self.name,
            "rect": list(self.rect) if self.rect is not None else None,
            "states": list(self.states),
            "children": [child.to_dict() for child in self.children],
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "UiNode":
        rect = data.get("rect")
        return UiNode(
            role=data["role"],
            name=data["name"],
            rect=tuple(rect) if rect is not None else None,
            states=list(data.get("states", [])),
            children=[UiNode.from_dict(c) for c in data.get("children", [])],
        )

    def iter_tree(self):
        """Yield this node and all its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.iter_tree()

    def render_lines(self, depth: int = 1):
        """Yield the text lines for this node and its descendants."""
        indent = "│  " * max(depth - 1, 0)
        prefix = "├─ " if depth > 0 else ""
        rect = f" ({self.rect[0]},{self.rect[1]} {self.rect[2]}x{self.rect[3]})" if self.rect else ""
        states = f" {{{', '.join(self.states)}}}" if self.states else ""
        name = self.name
        if len(name) > _MAX_NAME_CHARS:
            name = name[:_TRUNCATED_NAME_CHARS] + "..."
        yield f"{indent}{prefix}{name} [{self.role}]{rect}{states}\n"
        for child in self.children:
            yield from child.render_lines(depth + 1)


def _walk(nodes: Iterable[UiNode]):
    for node in nodes:
        yield from node.iter_tree()


@dataclass
class UiTreeSnapshot:
    """The UI tree of one window."""

    window_title: str
    window_rect: Rect
    tree: list[UiNode] = field(default_factory=list)

    def serialize_text(self) -> str:
        """Render the tree as indented text, one element per line."""
        x, y, w, h = self.window_rect
        header = f"[Window] {self.window_title} ({x},{y} {w}x{h})\n"
        return header + "".join(line for node in self.tree for line in node.render_lines(1))

    def has_useful_elements(self) -> bool:
        """True when there are at least three nodes and over 20% are named."""
        nodes = list(_walk(self.tree))
        total = len(nodes)
        named = sum(1 for n in nodes if n.name)
        return total >= 3 and named / max(total, 1) > 0.2

    def to_dict(self) -> dict[str, Any]:
        return {
            "window_title": self.window_title,
            "window_rect": list(self.window_rect),
            "tree": [node.to_dict() for node in self.tree],
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "UiTreeSnapshot":
        return UiTreeSnapshot(
            window_title=data["window_title"],
            window_rect=tuple(data["window_rect"]),
            tree=[UiNode.from_dict(n) for n in data.get("tree", [])],
        )