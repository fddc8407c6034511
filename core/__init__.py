"""Shared building blocks: configuration, logging and the Result type."""
