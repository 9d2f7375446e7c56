"""Typed access to NX-OS device state through the VSH shell."""

__version__ = "0.1.0"
