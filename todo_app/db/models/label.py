from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship
from todo_app.db.session import Base

class Label(Base):
    __tablename__ = "labels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False, unique=True)

    # Relationships
    todo_labels = relationship("TodoLabel", back_populates="label", cascade="all, delete")
