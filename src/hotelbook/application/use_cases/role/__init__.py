"""Role directory use cases."""
