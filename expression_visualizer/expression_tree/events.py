"""
Traversal events emitted by the stepwise evaluator.

Each event refers to the node it describes, so a renderer can highlight
that node while the matching log line is shown.
"""

from dataclasses import dataclass, field
from typing import Union

from .core.node import Node

VISIT = "visit"
RESOLVED = "resolved"
COMPUTED = "computed"

INDENT = "  "


@dataclass(frozen=True)
class VisitEvent:
  node: Node = field(compare=False)
  depth: int
  node_value: str = field(init=False)
  kind: str = field(default=VISIT, init=False)

  def __post_init__(self):
    object.__setattr__(self, 'node_value', self.node.value)

  def format_line(self, indent: str = INDENT) -> str:
    return f"{indent * self.depth}Visiting: {self.node_value}"


@dataclass(frozen=True)
class ResolvedEvent:
  node: Node = field(compare=False)
  depth: int
  value: float
  node_value: str = field(init=False)
  kind: str = field(default=RESOLVED, init=False)

  def __post_init__(self):
    object.__setattr__(self, 'node_value', self.node.value)

  def format_line(self, indent: str = INDENT) -> str:
    return f"{indent * self.depth}  → Operand value: {self.value}"


@dataclass(frozen=True)
class ComputedEvent:
  node: Node = field(compare=False)
  depth: int
  left_value: float
  right_value: float
  result: float
  node_value: str = field(init=False)
  kind: str = field(default=COMPUTED, init=False)

  def __post_init__(self):
    object.__setattr__(self, 'node_value', self.node.value)

  def format_line(self, indent: str = INDENT) -> str:
    return (f"{indent * self.depth}  → Computing: {self.left_value} "
            f"{self.node_value} {self.right_value} = {self.result}")


TraversalEvent = Union[VisitEvent, ResolvedEvent, ComputedEvent]


def format_events(events, indent: str = INDENT) -> str:
  """Render events as the stepwise evaluation log, one line per event."""
  return "\n".join(event.format_line(indent) for event in events)
