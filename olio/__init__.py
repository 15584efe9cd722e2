"""A small ray tracer that renders a sphere or a triangle described in a plain-text scene file."""

__version__ = "0.1.0"