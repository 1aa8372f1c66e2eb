"""Aura storefront application."""
