import logging
from typing import List, Optional, Dict, Any

from sqlalchemy import select

from database.models import Subject
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class SubjectRepository(BaseRepository):
    def get_by_id(self, subject_id: str) -> Optional[Subject]:
        return self.db.get(Subject, subject_id)

    def list_all(self) -> List[Subject]:
        stmt = select(Subject).order_by(Subject.id)
        return list(self.db.execute(stmt).scalars().all())

    def upsert(self, data: Dict[str, Any]) -> Subject:
        """Insert or refresh a catalog entry by id."""
        subject = self.get_by_id(data['id'])
        if subject is None:
            subject = Subject(id=data['id'])
            self.db.add(subject)
        subject.name = data['name']
        subject.category = data['category']
        subject.department = data.get('department')
        self.db.flush()
        return subject
