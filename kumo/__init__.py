"""Kumo - incremental Ichimoku Cloud indicator engine."""

__version__ = "0.1.0"
