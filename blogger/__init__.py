"""Blogger: file-backed storage for posts, tags and authors."""

__version__ = "0.1.0"
