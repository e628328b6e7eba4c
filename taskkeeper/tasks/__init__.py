"""
Taskkeeper API - Tasks Module

Owner-scoped task CRUD.
"""

from taskkeeper.tasks.router import router as tasks_router

__all__ = ["tasks_router"]
