"""
Domain layer for the PJiFitness Coach API.

Pure functions and models with no infrastructure concerns:
- plans: Starter plan normalization pipeline
- workouts: Next-workout repair
- logs: Daily logs, coach text blocks and sheet-derived context
- nutrition: Meal text parsing and food resolution
"""
