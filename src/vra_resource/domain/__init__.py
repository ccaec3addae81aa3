"""Domain layer - resource and request models, ports and exceptions."""
