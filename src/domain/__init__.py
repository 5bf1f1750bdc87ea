"""Domain layer: models, parsers and the task dependency graph."""
