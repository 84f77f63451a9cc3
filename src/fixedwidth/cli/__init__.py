"""Command line interface for fixedwidth."""
