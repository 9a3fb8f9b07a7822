"""Symbolic Calculus Package

Immutable expression trees over real or complex scalars: numeric evaluation,
exact symbolic differentiation, substitution and fully parenthesized rendering.
"""

from .expression import Expression, as_expression, sin, cos, exp, log, pow
from .core import (
  Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode,
  NodeKind, REAL_DTYPE, COMPLEX_DTYPE
)
from .config import EngineConfig, get_config, set_config, reset_config
from .errors import (
  ExpressionError, UndefinedVariableError, UnsupportedDerivativeError, SymPyConversionError
)
from .logging_system import LogLevel, ExpressionLogger, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Expression", "as_expression", "sin", "cos", "exp", "log", "pow",
  "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
  "NodeKind", "REAL_DTYPE", "COMPLEX_DTYPE",
  "EngineConfig", "get_config", "set_config", "reset_config",
  "ExpressionError", "UndefinedVariableError", "UnsupportedDerivativeError", "SymPyConversionError",
  "LogLevel", "ExpressionLogger", "get_logger", "set_log_level", "configure_logging"
]
