"""
Configuration modules for skyline generation.
"""

from .settings import Settings, settings
from .mountain_config import (
    DEFAULT_CONFIG,
    FillSpec,
    FlatAlign,
    FlatSpec,
    GradientSpec,
    MountainConfig,
    PeakSpec,
    RidgeSpec,
    ShadowSpec,
    StageSpec,
    ValleySpec,
    default_config,
    resolve_config,
)

__all__ = ['Settings', 'settings', 'DEFAULT_CONFIG', 'FillSpec', 'FlatAlign',
           'FlatSpec', 'GradientSpec', 'MountainConfig', 'PeakSpec', 'RidgeSpec',
           'ShadowSpec', 'StageSpec', 'ValleySpec', 'default_config', 'resolve_config']
