"""Logging setup, message sinks and replay recording."""
