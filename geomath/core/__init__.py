"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (Earth radius, unit thresholds, bounds)
- exceptions: Custom exception hierarchy
"""
