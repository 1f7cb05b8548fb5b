"""Command-line interface for ftree."""
