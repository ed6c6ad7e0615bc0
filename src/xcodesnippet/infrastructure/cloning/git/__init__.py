"""Git cloning."""
