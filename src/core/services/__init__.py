"""
Business services for the passenger roster.

- todos.py: todo list, toggle, delete and AI generation
- passengers.py: filtered reads, CSV imports, sample bootstrap, clearing
- ingestion.py: positional CSV parsing
- stats.py: single-pass passenger statistics
- generation.py: Bedrock-backed todo title generation
- migration.py: programmatic Alembic upgrade
"""

__all__: list[str] = []
