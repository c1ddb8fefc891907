"""Entrypoints for groupjoin (currently the command-line interface)."""
