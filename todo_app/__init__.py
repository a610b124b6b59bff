"""
Todo App Backend

In-memory task management service with per-user accounts and
session-scoped authorization.
"""

__version__ = "0.1.0"
