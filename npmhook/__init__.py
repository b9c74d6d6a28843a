"""npm publish hooks for release pipelines."""

__version__ = "2.0.0"
