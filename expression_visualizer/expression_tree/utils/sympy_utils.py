import sympy as sp
from typing import Optional, Dict, Any
from ..core.node import Node


class SymPyBridge:
  """Converts expression trees to SymPy for reference evaluation and display"""

  def to_sympy(self, root: Optional[Node]) -> sp.Expr:
    """Unevaluated SymPy expression with the same shape as the tree"""
    if root is None:
      return sp.Float(0)
    return root.to_sympy()

  def evaluate(self, root: Optional[Node]) -> float:
    """
    Evaluate the tree with SymPy's arithmetic instead of numpy's.

    Not sign-faithful for infinities: SymPy folds any division by zero into
    complex infinity (``zoo``), which is reported as ``+inf``. The float
    evaluator gives ``-inf`` for ``0-1/0`` where this gives ``+inf``.
    """
    value = self.to_sympy(root).evalf()
    if value is sp.zoo:
      return float('inf')
    return float(value)

  def sympify_infix(self, infix: str) -> sp.Expr:
    """
    Parse an infix string directly with SymPy.

    SymPy treats '**' as right-associative, so chained powers ("2^3^2") do
    not match the left-associative trees built by this package.
    """
    return sp.sympify(infix.replace('^', '**'))

  def simplify_expression(self, root: Optional[Node]) -> Dict[str, Any]:
    """
    Simplify the tree's expression

    Returns:
        Dict with simplified expression string and its numeric value
    """
    try:
      simplified = sp.nsimplify(self.to_sympy(root))
      return {
        'simplified': self._convert_from_sympy(simplified),
        'value': float(simplified.evalf()),
        'strategy_used': 'nsimplify'
      }
    except (TypeError, ValueError, ZeroDivisionError) as e:
      return {
        'simplified': root.to_string() if root is not None else '',
        'strategy_used': 'failed',
        'error': str(e)
      }

  def _convert_from_sympy(self, sympy_expr: sp.Expr) -> str:
    """Convert SymPy expression back to string"""
    return str(sympy_expr).replace('**', '^')

  def latex_representation(self, root: Optional[Node]) -> str:
    """Get LaTeX representation of the expression"""
    return sp.latex(self.to_sympy(root))
