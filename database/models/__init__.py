from .base import Base
from .subject import Subject
from .user import User, SubjectExpertise, SubjectNeed, Availability
from .session import TutoringSession, SESSION_STATUSES, SESSION_MODES
from .review import Review
from .message import Message
from .notification import Notification, NOTIFICATION_TYPES

__all__ = [
    'Base',
    'Subject',
    'User',
    'SubjectExpertise',
    'SubjectNeed',
    'Availability',
    'TutoringSession',
    'SESSION_STATUSES',
    'SESSION_MODES',
    'Review',
    'Message',
    'Notification',
    'NOTIFICATION_TYPES',
]
