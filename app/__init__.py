"""HTTP surface and pydantic schemas."""
