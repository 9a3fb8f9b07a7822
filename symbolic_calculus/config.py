"""Engine-wide settings for rendering and the default scalar type."""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class EngineConfig:
  """Runtime settings shared by the expression engine.

  Attributes:
      default_dtype: Scalar type of expressions built without an explicit dtype.
      display_precision: Significant digits used when rendering constants.
  """

  default_dtype: str = 'float64'
  display_precision: int = 6

  def __post_init__(self):
    if self.display_precision < 1:
      raise ValueError(f"display_precision must be positive, got {self.display_precision}")


_global_config: Optional[EngineConfig] = None


def get_config() -> EngineConfig:
  """Get or create the global configuration"""
  global _global_config
  if _global_config is None:
    _global_config = EngineConfig()
  return _global_config


def set_config(config: Optional[EngineConfig] = None, **overrides) -> EngineConfig:
  """Install a configuration, or update fields of the current one"""
  global _global_config
  base = config if config is not None else get_config()
  _global_config = replace(base, **overrides) if overrides else base
  return _global_config


def reset_config() -> EngineConfig:
  global _global_config
  _global_config = EngineConfig()
  return _global_config
