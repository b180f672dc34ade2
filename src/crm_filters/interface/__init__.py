"""Command line and validation surface."""
