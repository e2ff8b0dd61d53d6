"""Core building blocks: results, errors, enums, settings and DI wiring."""
