"""Cross-cutting concerns: configuration, logging, metrics, wiring."""
