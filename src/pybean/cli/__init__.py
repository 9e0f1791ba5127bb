"""PyBean command-line interface."""
