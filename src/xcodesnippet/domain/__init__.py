"""Domain layer: snippet entities, errors and protocols."""
