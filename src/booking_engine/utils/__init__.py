"""Shared utilities for the booking engine."""
