"""
FastAPI adapter: error handlers and the response body schema.
"""
