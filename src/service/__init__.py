"""Pure decision engines."""
