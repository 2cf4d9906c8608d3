"""Outer surfaces: UCI loop, FastAPI REST app, terminal CLI."""
