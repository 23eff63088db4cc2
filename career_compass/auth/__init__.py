"""Request-scoped credential handling."""
