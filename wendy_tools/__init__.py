"""Wendy tools -- project scaffolding and asset descriptor generation.

``wendy_tools.scaffolder`` creates new Demo, Game and Test projects for the
engine tree; ``wendy_tools.assets`` derives material and texture descriptors
from mesh and image sources.
"""

__version__ = "0.1.0"
