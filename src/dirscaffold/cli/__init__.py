"""Command-line interface for dirscaffold."""
