"""Outward facing representations of the domain entities."""
