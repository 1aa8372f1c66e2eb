"""Aura services."""
