"""Integrations with the host platform."""
