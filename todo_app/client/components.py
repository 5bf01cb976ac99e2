"""Headless counterparts of the todo UI components.

Each one holds the transient input state a form or list row would keep and
forwards finished actions to :class:`~todo_app.client.store.TodoStore`.
"""
from typing import List, Optional

from todo_app.api.label.schemas import LabelOut
from todo_app.api.todo.schemas import TodoOut
from .labels import toggle_labels
from .store import TodoStore


class TodoForm:
    def __init__(self, store: TodoStore):
        self.store = store
        self.text = ""
        self.labels: List[LabelOut] = []

    def toggle_label(self, label: LabelOut):
        self.labels = toggle_labels(self.labels, label)

    def submit(self) -> bool:
        if not self.text:
            return False
        self.store.create(self.text, [label.id for label in self.labels])
        self.text = ""
        self.labels = []
        return True


class TodoItem:
    def __init__(self, store: TodoStore, todo: TodoOut):
        self.store = store
        self.todo = todo
        self.is_editing = False
        self.edit_text = todo.text
        self.edit_labels: List[LabelOut] = list(todo.labels)

    def toggle_completed(self):
        self.store.update(
            self.todo.id,
            completed=not self.todo.completed,
            label_ids=[label.id for label in self.todo.labels],
        )

    def start_edit(self):
        self.edit_text = self.todo.text
        self.edit_labels = list(self.todo.labels)
        self.is_editing = True

    def toggle_label(self, label: LabelOut):
        self.edit_labels = toggle_labels(self.edit_labels, label)

    def finish_edit(self):
        self.store.update(
            self.todo.id,
            text=self.edit_text,
            completed=self.todo.completed,
            label_ids=[label.id for label in self.edit_labels],
        )
        self.is_editing = False

    def delete(self):
        self.store.delete(self.todo.id)


class SideNav:
    def __init__(self, store: TodoStore):
        self.store = store

    @property
    def labels(self) -> List[LabelOut]:
        return self.store.labels

    def select(self, label: Optional[LabelOut]):
        self.store.select_label_filter(label)

    def submit_new_label(self, name: str) -> Optional[LabelOut]:
        return self.store.create_label(name)

    def delete_label(self, label_id: int):
        self.store.delete_label(label_id)
