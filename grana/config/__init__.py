"""
Configuration module for the GranaApp calculators.
"""
from .settings import (
    GranaConfig,
    get_config,
    load_config,
    reload_config
)

__all__ = [
    'GranaConfig',
    'get_config',
    'load_config',
    'reload_config'
]
