"""Logging helpers for the budget application."""
