"""Infrastructure layer: identity directory adapters."""
