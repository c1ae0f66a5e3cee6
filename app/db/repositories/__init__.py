# Repository pattern: abstract data access (SOLID - Dependency Inversion)

from app.db.repositories.comment_repository import CommentRepository
from app.db.repositories.item_repository import ItemRepository
from app.db.repositories.review_repository import ReviewRepository
from app.db.repositories.user_repository import UserRepository

__all__ = ["UserRepository", "ItemRepository", "ReviewRepository", "CommentRepository"]
