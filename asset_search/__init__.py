"""Filter and relevance-ranking engine for media asset libraries."""

__version__ = "0.1.0"
