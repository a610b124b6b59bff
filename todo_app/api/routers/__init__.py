"""
API Routers Module

This module contains all FastAPI routers for the application.
Each router handles a specific domain of the API.

Available routers:
- auth: Registration, login/logout, caller identity
- tasks: Owner-scoped task endpoints
- system: Health and recent logs
"""

__all__ = ["auth", "tasks", "system"]
