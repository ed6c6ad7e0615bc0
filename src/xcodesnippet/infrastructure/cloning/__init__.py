"""Cloning of remote snippet repositories."""
