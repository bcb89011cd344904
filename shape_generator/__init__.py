"""Parametric shape point generator package."""

__all__ = ["export", "parameters", "pipeline", "shapes", "vec3"]
