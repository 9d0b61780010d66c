"""
Collaboration Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class MembershipStatus(str, Enum):
    """
    Project membership lifecycle status.

    declined is never persisted: the row is deleted on decline, the value
    only appears in the decline response.
    """

    pending = "pending"
    active = "active"
    declined = "declined"


class DependencyType(str, Enum):
    """Kind of edge between two tasks"""

    blocks = "blocks"
    related = "related"


class TaskStatus(str, Enum):
    """Task workflow status"""

    todo = "todo"
    in_progress = "in-progress"
    done = "done"


class ProjectStatus(str, Enum):
    """Project status"""

    active = "active"
    archived = "archived"
    completed = "completed"
    on_hold = "on_hold"
