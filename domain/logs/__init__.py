"""Daily log merging and coach-text parsing."""
