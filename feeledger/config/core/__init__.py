"""
Core configuration management components.

- ConfigRegistry: Central registry for domain configurations
- ConfigProvider: Abstract provider interface and implementations
"""

from .registry import ConfigRegistry
from .provider import ConfigProvider, FileConfigProvider, RuntimeConfigProvider

__all__ = [
    'ConfigRegistry',
    'ConfigProvider',
    'FileConfigProvider',
    'RuntimeConfigProvider'
]
