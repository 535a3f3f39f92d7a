"""
Shared module package.

Contains cross-cutting concerns:
- Header value escaping
- Logging configuration
"""
