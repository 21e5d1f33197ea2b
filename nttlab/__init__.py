"""Polynomial multiplication modulo a prime with the NTT and Montgomery arithmetic."""

__version__ = "0.1.0"