"""Infrastructure layer: middleware, dependencies and application wiring."""
