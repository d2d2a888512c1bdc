"""
System configuration domain.
"""

from .config import SystemConfig, Environment, LogLevel

__all__ = [
    'SystemConfig',
    'Environment',
    'LogLevel'
]
