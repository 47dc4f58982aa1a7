"""Transports for concrete databases."""
