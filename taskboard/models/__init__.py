from .task import Task
from .user import Roles, UserInfo

__all__ = ["Task", "Roles", "UserInfo"]
