"""csptrecon - client-side path traversal candidate URL generator."""

__version__ = "1.0.0"
