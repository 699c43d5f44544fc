"""
Galaxon — comparison capabilities and floating-point tolerance primitives.
"""

__version__ = "0.1.0"
