"""Role-permission directory use cases."""
