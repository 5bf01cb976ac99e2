from typing import List, Optional, Sequence

from todo_app.api.label.schemas import LabelOut
from todo_app.api.todo.schemas import TodoOut


def toggle_labels(labels: Sequence[LabelOut], label: LabelOut) -> List[LabelOut]:
    """Return a new list with ``label`` removed if present (by id), appended otherwise."""
    if any(existing.id == label.id for existing in labels):
        return [existing for existing in labels if existing.id != label.id]
    return [*labels, label]


def filter_todos(todos: Sequence[TodoOut], label_id: Optional[int]) -> List[TodoOut]:
    if label_id is None:
        return list(todos)
    return [
        todo for todo in todos
        if any(label.id == label_id for label in todo.labels)
    ]
