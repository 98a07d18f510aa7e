from friendbook.models.friend import Friend

__all__ = ["Friend"]
