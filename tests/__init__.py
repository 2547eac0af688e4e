"""Whisker test suite."""
