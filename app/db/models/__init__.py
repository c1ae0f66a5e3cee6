from app.db.models.comment import Comment
from app.db.models.item import Item
from app.db.models.review import Review
from app.db.models.user import User

__all__ = ["User", "Item", "Review", "Comment"]
