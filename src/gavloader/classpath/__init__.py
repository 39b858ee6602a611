"""
Classpath state.

This package handles:
1. The append-only dynamic classpath that fetched artifacts are added to
2. Presence queries over the boot snapshot and the dynamic classpath
"""

from .classpath_index import ClasspathIndex
from .dynamic_classloader import DynamicClassLoader

__all__ = ["ClasspathIndex", "DynamicClassLoader"]
