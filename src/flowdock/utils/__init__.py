"""Utility helpers shared across Flowdock."""
