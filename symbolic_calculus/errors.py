"""Exceptions raised by the expression engine.

Scalar-domain problems (division by zero, log of zero) are not errors here:
they produce whatever numpy produces for the scalar type.
"""


class ExpressionError(Exception):
  """Base class for engine errors"""


class UndefinedVariableError(ExpressionError, KeyError):
  """Raised by evaluation when a variable has no binding"""

  def __init__(self, name: str):
    super().__init__(name)
    self.name = name

  def __str__(self) -> str:
    return f"Undefined variable: {self.name}"


class UnsupportedDerivativeError(ExpressionError, NotImplementedError):
  """Raised when differentiating a power whose exponent is not constant"""

  def __init__(self, exponent: str):
    super().__init__(exponent)
    self.exponent = exponent

  def __str__(self) -> str:
    return f"Derivative of non-constant exponents not implemented (exponent: {self.exponent})"


class SymPyConversionError(ExpressionError, ValueError):
  """Raised when a SymPy object has no counterpart in the node model"""
