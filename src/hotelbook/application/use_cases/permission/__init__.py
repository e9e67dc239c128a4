"""Permission directory use cases."""
