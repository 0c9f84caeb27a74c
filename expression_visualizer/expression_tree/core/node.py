import sympy as sp
from abc import ABC, abstractmethod
from typing import Callable, Iterator, List, Optional, Tuple, TypeVar
from .operators import NodeType, is_operator, parse_operand

T = TypeVar('T')


class Node(ABC):
  """Base node class with size and hash caching"""

  __slots__ = ('_hash_cache', '_size_cache')

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  @property
  @abstractmethod
  def value(self) -> str:
    pass

  @property
  def left(self) -> Optional['Node']:
    return None

  @property
  def right(self) -> Optional['Node']:
    return None

  def is_operator(self) -> bool:
    return is_operator(self.value)

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def to_postfix(self) -> str:
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = self._compute_size()
    return self._size_cache

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return False
    return (type(self) is type(other) and hash(self) == hash(other) and
            self.to_postfix() == other.to_postfix())

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()!r})"


def _postorder(root: Node) -> Iterator[Node]:
  """Children before parent, left before right, without recursion."""
  stack: List[Tuple[Node, bool]] = [(root, False)]
  while stack:
    node, expanded = stack.pop()
    if expanded or isinstance(node, OperandNode):
      yield node
      continue
    stack.append((node, True))
    stack.append((node.right, False))
    stack.append((node.left, False))


def fold_tree(root: Node, on_operand: Callable[['OperandNode'], T],
              on_operator: Callable[['OperatorNode', T, T], T]) -> T:
  """Bottom-up fold over a complete tree using an explicit value stack."""
  values: List[T] = []
  for node in _postorder(root):
    if isinstance(node, OperandNode):
      values.append(on_operand(node))
    else:
      right = values.pop()
      left = values.pop()
      values.append(on_operator(node, left, right))
  return values.pop()


class OperandNode(Node):
  """Leaf holding the literal text of a numeric token."""

  __slots__ = ('_value',)

  def __init__(self, value: str):
    super().__init__()
    self._value = value
    self._size_cache = 1

  @property
  def value(self) -> str:
    return self._value

  def numeric_value(self) -> float:
    return parse_operand(self._value)

  def to_string(self) -> str:
    return self._value

  def to_postfix(self) -> str:
    return self._value

  def copy(self) -> 'OperandNode':
    return OperandNode(self._value)

  def to_sympy(self) -> sp.Expr:
    # Float keeps sympy from folding the literal into an exact rational
    return sp.Float(self.numeric_value())

  def _compute_size(self) -> int:
    return 1

  def _compute_hash(self) -> int:
    return hash((NodeType.OPERAND, self._value))


class OperatorNode(Node):
  """Binary operator; always owns exactly two children.

  Size and hash are taken from the children's cached values at construction,
  so neither walks the tree again however deep it is.
  """

  __slots__ = ('operator', '_left', '_right')

  def __init__(self, operator: str, left: Node, right: Node):
    super().__init__()
    self.operator = operator
    self._left = left
    self._right = right
    self._size_cache = self._compute_size()
    self._hash_cache = self._compute_hash()

  @property
  def value(self) -> str:
    return self.operator

  @property
  def left(self) -> Node:
    return self._left

  @property
  def right(self) -> Node:
    return self._right

  def to_string(self) -> str:
    return fold_tree(self, OperandNode.to_string,
                     lambda node, left, right: f"({left} {node.operator} {right})")

  def to_postfix(self) -> str:
    return " ".join(node.value for node in _postorder(self))

  def copy(self) -> 'OperatorNode':
    return fold_tree(self, OperandNode.copy,
                     lambda node, left, right: OperatorNode(node.operator, left, right))

  def _compute_size(self) -> int:
    # a missing child only occurs in hand-built trees handed to the printer
    return 1 + sum(child.size() for child in (self._left, self._right) if child is not None)

  def _compute_hash(self) -> int:
    return hash((NodeType.OPERATOR, self.operator, hash(self._left), hash(self._right)))

  def to_sympy(self) -> sp.Expr:
    return fold_tree(self, OperandNode.to_sympy, _sympy_operation)


def _sympy_operation(node: OperatorNode, left: sp.Expr, right: sp.Expr) -> sp.Expr:
  if node.operator == '+':
    return sp.Add(left, right, evaluate=False)
  elif node.operator == '-':
    return sp.Add(left, sp.Mul(-1, right, evaluate=False), evaluate=False)
  elif node.operator == '*':
    return sp.Mul(left, right, evaluate=False)
  elif node.operator == '/':
    return sp.Mul(left, sp.Pow(right, -1, evaluate=False), evaluate=False)
  elif node.operator == '^':
    return sp.Pow(left, right, evaluate=False)
  else:
    raise RuntimeWarning(f"to_sympy reached unexpected operation at node {type(node)}")
