"""Ports consumed by the dispatcher."""
