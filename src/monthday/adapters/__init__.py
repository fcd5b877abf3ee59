"""Integrations of month-day values with persistence and payload schemas."""
