"""Plain domain records."""
