"""Command-line interface for filemapper."""
