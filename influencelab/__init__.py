"""Influence Lab site services."""
