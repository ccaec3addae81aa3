"""Infrastructure layer - transport, listing and logging implementations."""
