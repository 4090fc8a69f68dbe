"""Plugin-driven batch image processing: input, edit and output plugins in a pipeline."""

__version__ = "0.1.0"