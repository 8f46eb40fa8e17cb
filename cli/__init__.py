"""Command line interface for midisplit."""
