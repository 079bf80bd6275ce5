"""Core discovery and manifest logic for typst-project."""
