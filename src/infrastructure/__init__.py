"""Infrastructure adapters: database and profile repositories."""
