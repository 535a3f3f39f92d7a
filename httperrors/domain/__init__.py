"""
Domain layer: status table, error types and library errors.

No framework imports allowed.
"""
