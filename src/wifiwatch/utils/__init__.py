"""Shared helpers for running OS commands and checking privileges."""
