from dataclasses import dataclass


@dataclass
class User:
    """User entity for authentication."""

    id: int
    username: str
    password_hash: str
    salt: str

    def to_dict(self) -> dict:
        """Convert user to dictionary for MongoDB storage."""
        return {
            "_id": self.id,
            "username": self.username,
            "password_hash": self.password_hash,
            "salt": self.salt,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Create user from MongoDB document."""
        return cls(
            id=data["_id"],
            username=data["username"],
            password_hash=data["password_hash"],
            salt=data["salt"],
        )
