"""Helpers around the spec model."""
