"""Pygame frontend. Imports pygame; the simulation core does not."""
