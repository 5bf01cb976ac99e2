from todo_app.api.label.schemas import LabelOut
from todo_app.api.todo.schemas import TodoOut
from todo_app.client.labels import filter_todos, toggle_labels

A = LabelOut(id=1, name="a")
B = LabelOut(id=2, name="b")


class TestToggleLabels:

    def test_appends_missing_label(self):
        assert toggle_labels([], A) == [A]

    def test_removes_present_label(self):
        assert toggle_labels([A], A) == []

    def test_matches_by_id_only(self):
        renamed = LabelOut(id=1, name="renamed")

        assert toggle_labels([A, B], renamed) == [B]

    def test_appends_at_end(self):
        assert toggle_labels([B], A) == [B, A]

    def test_does_not_mutate_input(self):
        labels = [A]

        toggle_labels(labels, B)
        toggle_labels(labels, A)

        assert labels == [A]

    def test_toggling_twice_is_identity(self):
        assert toggle_labels(toggle_labels([A], B), B) == [A]


class TestFilterTodos:

    todos = [
        TodoOut(id=3, text="both", completed=False, labels=[A, B]),
        TodoOut(id=2, text="only b", completed=True, labels=[B]),
        TodoOut(id=1, text="none", completed=False, labels=[]),
    ]

    def test_no_filter_returns_everything(self):
        assert filter_todos(self.todos, None) == self.todos

    def test_no_filter_returns_a_copy(self):
        assert filter_todos(self.todos, None) is not self.todos

    def test_filter_by_label_id(self):
        assert [todo.id for todo in filter_todos(self.todos, 1)] == [3]
        assert [todo.id for todo in filter_todos(self.todos, 2)] == [3, 2]

    def test_unknown_label_gives_empty_list(self):
        assert filter_todos(self.todos, 99) == []
