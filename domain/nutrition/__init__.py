"""Meal text parsing and nutrition resolution."""
