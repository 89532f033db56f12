"""Command line interface for the server composer."""
