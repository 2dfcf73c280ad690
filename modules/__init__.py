"""
Domain modules for the code review backend.

Each module exposes a public API through its __init__.py:
- users: User records and the JSON-file user store
- auth: Registration, login and bearer token handling
- review: Heuristic code review report

Modules depend on each other only through the names exported here.
"""
