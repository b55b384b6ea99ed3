"""Domain layer: exceptions and ports."""
