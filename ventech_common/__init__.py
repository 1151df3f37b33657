"""Shared persistence and logging helpers for VenTech services."""
