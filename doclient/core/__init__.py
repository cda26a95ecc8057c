"""Shared transport, configuration and errors."""
