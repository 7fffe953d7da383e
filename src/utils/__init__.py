"""
Utility modules for SentiNik.

Cross-cutting concerns:
- Debounce: cancel-then-schedule execution of the search recompute
- Formatting: playtime, star and text helpers for the table views
"""
