"""Relational database wiring: engines, dialect names, metadata and tables."""
