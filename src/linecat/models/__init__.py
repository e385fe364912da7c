"""Value models passed between the CLI, config and core layers."""

from .config import FeatureConfig, StoredDefaults
from .line import Line

__all__ = ["FeatureConfig", "Line", "StoredDefaults"]
