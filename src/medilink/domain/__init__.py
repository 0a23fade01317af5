"""
Domain layer: storage-agnostic records, identifiers and errors.
"""
