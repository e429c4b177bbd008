"""Core infrastructure: configuration, logging, security and the entity store."""
