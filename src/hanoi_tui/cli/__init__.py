"""Command line interface and interactive game screen."""
