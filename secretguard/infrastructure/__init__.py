"""Infrastructure adapters (AWS, cache, logging, metrics)."""
