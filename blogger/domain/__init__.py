"""Domain layer for Blogger."""
