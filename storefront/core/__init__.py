"""Core package: configuration, result types, errors and dependency wiring."""
