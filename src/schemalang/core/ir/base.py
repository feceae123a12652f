"""Common base for all AST node types."""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field

from .location import Span


class Node(BaseModel):
    """
    Immutable AST node.

    ``span`` is filled in by the parser and left empty for hand-built
    nodes; it never takes part in printing.
    """

    span: Span | None = Field(default=None, description="Source range the node was parsed from")

    model_config = ConfigDict(frozen=True)

    def without_spans(self) -> Self:
        """Copy of this subtree with every span removed, for structural comparison."""
        update: dict[str, Any] = {"span": None}
        for name in type(self).model_fields:
            if name == "span":
                continue
            update[name] = _strip(getattr(self, name))
        return self.model_copy(update=update)


def _strip(value: Any) -> Any:
    if isinstance(value, Node):
        return value.without_spans()
    if isinstance(value, list):
        return [_strip(item) for item in value]
    return value
