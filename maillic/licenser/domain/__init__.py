"""Domain layer: key format, expiry and identity rules."""
