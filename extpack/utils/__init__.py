"""Utility helpers shared across extpack."""
