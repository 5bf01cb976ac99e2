from .api import ApiError, TodoApiClient
from .labels import filter_todos, toggle_labels
from .store import TodoStore
