"""pygame drawing surface and control widgets."""

from lissascope.visualizers.canvas import PygameCanvas

__all__ = ["PygameCanvas"]
