"""Preparation of SPLAT! propagation runs: coordinates, LRP parameters, command lines, file listings and zooming."""

__version__ = "0.1.0"
__all__ = ["catalog", "cli", "command", "coordinates", "lrp", "zoom"]