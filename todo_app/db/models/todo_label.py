from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from todo_app.db.session import Base

class TodoLabel(Base):
    __tablename__ = "todo_labels"
    __table_args__ = (UniqueConstraint("todo_id", "label_id"),)

    id = Column(Integer, primary_key=True)

    # Checked at commit so a todo, a label and their link can land in one transaction in any order
    todo_id = Column(
        Integer,
        ForeignKey("todos.id", ondelete="CASCADE", deferrable=True, initially="DEFERRED"),
        nullable=False,
    )
    label_id = Column(
        Integer,
        ForeignKey("labels.id", ondelete="CASCADE", deferrable=True, initially="DEFERRED"),
        nullable=False,
    )

    # Relationships
    todo = relationship("Todo", back_populates="todo_labels")
    label = relationship("Label", back_populates="todo_labels")
