"""Domain layer — entity records and collections.

Pure Python + Pydantic. No I/O, no database access.
"""
