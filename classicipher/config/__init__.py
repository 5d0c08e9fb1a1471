"""
Configuration Package

This package provides the engine defaults and environment overrides.
"""

from .settings import ENGINE_DEFAULT_PARAMS, OUTPUT_FORMATS, EngineConfig, load_config

__all__ = ['ENGINE_DEFAULT_PARAMS', 'OUTPUT_FORMATS', 'EngineConfig', 'load_config']
