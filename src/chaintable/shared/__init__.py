"""Shared building blocks for chaintable: constants and error types."""
