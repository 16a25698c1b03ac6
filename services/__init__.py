"""Statistics core and the input loader."""
