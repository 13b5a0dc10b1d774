"""
twig

A version control command-line tool. This package holds its command-line
interface and the alias-aware help engine.
"""

__version__ = "0.1.0"
