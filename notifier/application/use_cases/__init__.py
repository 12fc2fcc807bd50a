"""Use cases for producers and renderers of notifications."""
