"""
Application layer: normalization engine, upgrade contract,
construction and status-specific factories.
"""
