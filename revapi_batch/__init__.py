"""Batch client for the StatPro Revolution Web API."""

__version__ = "0.1.0"
