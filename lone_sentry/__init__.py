"""A small 2D arcade game: a sentry ship that moves sideways and fires missiles, drawn with OpenGL."""

__version__ = "0.1.0"