import logging
from typing import Iterable, List, Optional

from todo_app.api.label.schemas import LabelOut
from todo_app.api.todo.schemas import TodoOut
from .api import TodoApiClient
from .labels import filter_todos

logger = logging.getLogger(__name__)


class TodoStore:
    """Client-side state for the todo list.

    The server is the source of truth. After every todo mutation the whole
    list is fetched again and replaces ``todos``; nothing is patched in place.
    Label creation is the one exception and appends the returned label.

    Calls run one after another. If the API raises, the exception reaches the
    caller and the state fields keep their previous values.
    """

    def __init__(self, api: TodoApiClient):
        self.api = api
        self.todos: List[TodoOut] = []
        self.labels: List[LabelOut] = []
        self.filter_label_id: Optional[int] = None

    def load(self):
        self.todos = self.api.get_todos()
        self.labels = self.api.get_labels()

    def reload_todos(self):
        self.todos = self.api.get_todos()

    @property
    def display_todos(self) -> List[TodoOut]:
        return filter_todos(self.todos, self.filter_label_id)

    # Todos

    def create(self, text: str, label_ids: Iterable[int] = ()) -> bool:
        if not text:
            return False
        self.api.add_todo(text, label_ids)
        self.reload_todos()
        return True

    def update(self, todo_id: int, text: Optional[str] = None, completed: Optional[bool] = None,
               label_ids: Optional[Iterable[int]] = None):
        self.api.update_todo(todo_id, text=text, completed=completed, label_ids=label_ids)
        self.reload_todos()

    def delete(self, todo_id: int):
        self.api.delete_todo(todo_id)
        self.reload_todos()

    # Labels

    def select_label_filter(self, label: Optional[LabelOut]):
        self.filter_label_id = label.id if label is not None else None

    def create_label(self, name: str) -> Optional[LabelOut]:
        if any(label.name == name for label in self.labels):
            logger.info("Label %r already loaded, not creating", name)
            return None
        label = self.api.add_label(name)
        self.labels = [*self.labels, label]
        return label

    def delete_label(self, label_id: int):
        self.api.delete_label(label_id)
        self.labels = [label for label in self.labels if label.id != label_id]
        if self.filter_label_id == label_id:
            self.filter_label_id = None
        self.reload_todos()
