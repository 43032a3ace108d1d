"""Format resolution from file paths and extensions."""
