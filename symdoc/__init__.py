"""Configuration, doc-comment model, symbol metadata, corpus and diagnostics for reference documentation."""

__version__ = "0.1.0"

__all__ = ["config", "corpus", "errors", "info", "javadoc", "refs", "reporter"]