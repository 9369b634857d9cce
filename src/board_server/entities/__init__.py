"""SQLModel database entities for the durable store.

Public and internal record schemas are in the schemas/ module.
"""

from board_server.entities.threads import ThreadEntity

__all__ = ["ThreadEntity"]
