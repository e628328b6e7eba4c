from enum import Enum


class TaskStatus(str, Enum):
    """Task status values. Any status may be set from any other."""
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
