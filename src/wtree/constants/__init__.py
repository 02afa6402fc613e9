"""Static tables and defaults shared across wtree modules."""
