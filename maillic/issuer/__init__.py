"""License issuing tools for development and tests."""
