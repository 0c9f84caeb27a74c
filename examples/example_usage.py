import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import asyncio
from expression_visualizer import (
  EXAMPLE_EXPRESSIONS, AnimationConfig, Expression, ExpressionError, StepAnimator, SymPyBridge
)


def show_expression(infix: str):
  """Print postfix form, tree and result for one expression"""
  try:
    expression = Expression.from_infix(infix)
  except ExpressionError as e:
    print(f"Error: {e}")
    return

  print(f"Infix Expression: {expression.infix}")
  print(f"Postfix Expression: {expression.postfix}")
  print("Expression Tree Structure:")
  print(expression.render())
  print(f"Result: {expression.evaluate()}")
  print(f"LaTeX: {SymPyBridge().latex_representation(expression.root)}")


async def animate(infix: str, delay: float = 0.3):
  """Replay the postorder evaluation with a pause between steps"""
  expression = Expression.from_infix(infix)
  print("Step-by-Step Evaluation (Postorder Traversal):\n")

  def highlight(event):
    print(f"[{event.node_value:>3}] {event.format_line()}")

  await StepAnimator(highlight, AnimationConfig(step_delay=delay)).play(expression.root)


if __name__ == "__main__":
  for example in EXAMPLE_EXPRESSIONS:
    show_expression(example)
    print("-" * 40)

  asyncio.run(animate(EXAMPLE_EXPRESSIONS[0]))
