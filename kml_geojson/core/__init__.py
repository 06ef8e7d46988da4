"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (namespace, default paths, style defaults)
- exceptions: Custom exception hierarchy
"""
