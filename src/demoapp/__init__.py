"""Demo HTTP service for exercising start/stop shell tooling."""

__version__ = "1.0.0"
