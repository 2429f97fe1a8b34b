"""
Container for source-mapping rules produced by metadata loaders.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from ..constants import EdgeKind

__all__ = ["Metadata", "Rule"]


@dataclass(slots=True)
class Rule:
    """A single mapping from a generated-code span to a semantic node.

    Attributes:
        begin: Byte offset where the span starts
        end: Byte offset where the span ends
        vname: ``kythe.proto.VName`` of the node the span maps to
        edge_out: Edge kind to emit between the span and the node
        reverse_edge: If True, the edge points from the node to the span
    """

    begin: int
    end: int
    vname: Any
    edge_out: EdgeKind = EdgeKind.GENERATES
    reverse_edge: bool = False

    def as_dict(self) -> dict[str, Any]:
        """Flatten the rule into a plain row."""
        return {
            "begin": self.begin,
            "end": self.end,
            "signature": self.vname.signature,
            "corpus": self.vname.corpus,
            "root": self.vname.root,
            "path": self.vname.path,
            "language": self.vname.language,
            "edge_kind": self.edge_out.value,
            "reverse_edge": self.reverse_edge,
        }


class Metadata:
    """Ordered collection of rules, also indexed by start offset.

    Example:
        >>> metadata = Metadata()
        >>> metadata.add_rule(Rule(begin=10, end=14, vname=vname))
        >>> [rule.end for rule in metadata.rules_for_location(10)]
        [14]
    """

    def __init__(self) -> None:
        self._rules: list[Rule] = []
        self._by_location: dict[int, list[Rule]] = {}

    def add_rule(self, rule: Rule) -> None:
        self._rules.append(rule)
        self._by_location.setdefault(rule.begin, []).append(rule)

    @property
    def rules(self) -> list[Rule]:
        """All rules in insertion order."""
        return list(self._rules)

    def rules_for_location(self, location: int) -> list[Rule]:
        """Return the rules whose span starts at ``location``."""
        return list(self._by_location.get(location, ()))

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"Metadata(rules={len(self._rules)})"
