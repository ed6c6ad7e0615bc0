"""File-system backed storage."""
