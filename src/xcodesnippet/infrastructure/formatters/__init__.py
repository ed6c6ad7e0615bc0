"""Presentation formatters."""
