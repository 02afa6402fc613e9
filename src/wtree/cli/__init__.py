"""Command-line interface for wtree."""
