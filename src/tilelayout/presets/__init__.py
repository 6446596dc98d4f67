"""Ready-made layouts."""

from .app import create_app_layout
from .split import create_split_layout

# Preset registry - maps preset names to factory functions
PRESETS = {
    "app": create_app_layout,
    "split": create_split_layout,
}

__all__ = ["PRESETS", "create_app_layout", "create_split_layout"]
