"""Kernel – shared building blocks (error hierarchy)."""
