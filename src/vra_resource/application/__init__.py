"""Application layer - services orchestrating the resource-action workflow."""
