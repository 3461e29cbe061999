"""Behavior hierarchies built from behaviors and arbitrators that verify the commands they choose."""

__version__ = "0.1.0"