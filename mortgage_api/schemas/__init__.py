# This project was developed with assistance from AI tools.
"""Pydantic schemas for calculator results and API responses."""
