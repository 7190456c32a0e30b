from database.repositories.base import BaseRepository
from database.repositories.user import UserRepository
from database.repositories.subject import SubjectRepository
from database.repositories.session import SessionRepository
from database.repositories.review import ReviewRepository
from database.repositories.message import MessageRepository
from database.repositories.notification import NotificationRepository

__all__ = [
    'BaseRepository',
    'UserRepository',
    'SubjectRepository',
    'SessionRepository',
    'ReviewRepository',
    'MessageRepository',
    'NotificationRepository',
]
