"""Command line interface for Human Sort."""
