"""Inbound adapters (HTTP)."""
