"""Observability — Logging configuration."""
