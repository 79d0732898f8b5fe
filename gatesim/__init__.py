"""Interactive logic gate simulator: gates, wire routing, signal propagation and a pygame editor."""

__version__ = "0.1.0"
__all__ = ["__version__"]