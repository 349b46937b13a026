"""A vertical-scrolling arcade space shooter with enemy waves and a boss."""

__version__ = "0.1.0"

__all__ = ["__version__"]