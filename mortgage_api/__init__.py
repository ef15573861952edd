# This project was developed with assistance from AI tools.
"""Mortgage payment and maximum-mortgage calculator service."""
