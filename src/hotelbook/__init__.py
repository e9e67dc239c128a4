"""hotelbook - role and permission service for the hotel booking backend."""

__version__ = "0.1.0"
