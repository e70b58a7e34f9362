"""
Exposes the version of tileproximity
"""

__all__ = ['__version__']

__version__ = 'v0.1.0'
