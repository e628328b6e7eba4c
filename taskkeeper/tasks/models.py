"""
Taskkeeper API - Task Models

Internal task model for database operations.
"""

from dataclasses import dataclass

from taskkeeper.tasks.enums import TaskStatus


@dataclass
class Task:
    """Task entity for database storage."""

    id: int
    title: str
    description: str
    status: TaskStatus
    user_id: int

    def to_dict(self) -> dict:
        """Convert task to dictionary for MongoDB storage."""
        return {
            "_id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "user_id": self.user_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create task from MongoDB document."""
        return cls(
            id=data["_id"],
            title=data["title"],
            description=data["description"],
            status=TaskStatus(data["status"]),
            user_id=data["user_id"],
        )
