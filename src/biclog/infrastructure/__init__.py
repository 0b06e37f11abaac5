"""Infrastructure layer — data file, schema, repositories.

This layer depends on stdlib and SQLAlchemy. It may import domain
records and :mod:`biclog.errors`, but never services, commands, or
output. Failures surface as typed exceptions, never as log lines.
"""
