from sqlalchemy import Column, Text

from .base import Base


class Subject(Base):
    """Catalog entry referenced by expertise, needs and sessions."""
    __tablename__ = 'subjects'

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    department = Column(Text)

    def __repr__(self):
        return f"<Subject(id={self.id}, name={self.name})>"
