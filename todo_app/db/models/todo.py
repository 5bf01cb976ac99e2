from sqlalchemy import Column, Integer, Text, Boolean, false
from sqlalchemy.orm import relationship
from todo_app.db.session import Base


class Todo(Base):
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, index=True)
    text = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, default=False, server_default=false())

    # Relationships
    todo_labels = relationship(
        "TodoLabel",
        back_populates="todo",
        cascade="all, delete-orphan",
        order_by="TodoLabel.id",
    )

    @property
    def labels(self):
        return [todo_label.label for todo_label in self.todo_labels]
