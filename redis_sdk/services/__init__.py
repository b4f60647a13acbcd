"""Services built on the Redis infrastructure."""
