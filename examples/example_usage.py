import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from symbolic_calculus import Expression, sin, exp, pow
from symbolic_calculus.logging_system import LogLevel, configure_logging


def real_demo(logger):
  """f(x) = x^2 + sin(x) over float64"""
  x = Expression("x")
  f = pow(x, 2.0) + sin(x)
  df = f.derivative("x")

  bindings = {"x": 1.5}
  print(f"f(x) = {f}")
  print(f"f'(x) = {df}")
  print(f"f'(x) simplified = {df.simplify()}")
  print(f"f(1.5) = {f.evaluate(bindings)}")
  print(f"f'(1.5) = {df.evaluate(bindings)}")
  logger.milestone(f"real demo done ({f.size()} -> {df.size()} nodes)")


def complex_demo(logger):
  """g(z) = exp(z) + z^2 over complex128"""
  z = Expression("z", dtype=complex)
  g = exp(z) + pow(z, 2.0)
  dg = g.derivative("z")

  bindings = {"z": 1.0 + 1.0j}
  print(f"\ng(z) = {g}")
  print(f"g'(z) = {dg}")
  print(f"g(1+i) = {g.evaluate(bindings)}")
  print(f"g'(1+i) = {dg.evaluate(bindings)}")
  logger.milestone(f"complex demo done ({g.size()} -> {dg.size()} nodes)")


if __name__ == "__main__":
  logger = configure_logging(LogLevel.MODERATE)
  real_demo(logger)
  complex_demo(logger)
