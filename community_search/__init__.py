"""Cross-module relevance search and suggestions for forum, blog and wiki content."""

__version__ = "1.0.0"
