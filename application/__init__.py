"""
Application Layer for the PJiFitness Coach API.

This package contains:
- exceptions.py: ServiceError hierarchy mapped to HTTP responses
- ports/: Abstract service interfaces (what the use cases need)
- use_cases/: Plan, daily log, coaching, nutrition and account workflows
"""
