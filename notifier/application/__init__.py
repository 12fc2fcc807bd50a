"""Application layer: rich object validation and notification use cases."""
