"""Command-line interface for the decoder."""
