import pytest

from todo_app.client.api import ApiError
from todo_app.client.store import TodoStore


@pytest.fixture
def store(fake_api):
    return TodoStore(fake_api)


class TestLoad:

    def test_load_fetches_todos_then_labels(self, store, fake_api):
        fake_api.add_label("urgent")
        fake_api.add_todo("buy milk", [1])
        fake_api.calls.clear()

        store.load()

        assert fake_api.names() == ["get_todos", "get_labels"]
        assert [todo.text for todo in store.todos] == ["buy milk"]
        assert [label.name for label in store.labels] == ["urgent"]


class TestTodoMutations:

    def test_create_posts_then_reloads(self, store, fake_api):
        assert store.create("buy milk") is True

        assert fake_api.names() == ["add_todo", "get_todos"]
        assert fake_api.calls[0] == ("add_todo", "buy milk", [])
        assert [todo.text for todo in store.todos] == ["buy milk"]

    def test_create_with_label_ids(self, store, fake_api):
        label = fake_api.add_label("urgent")
        fake_api.calls.clear()

        store.create("buy milk", [label.id])

        assert fake_api.calls[0] == ("add_todo", "buy milk", [label.id])
        assert store.todos[0].labels == [label]

    def test_create_empty_text_is_a_noop(self, store, fake_api):
        store.todos = ["sentinel"]

        assert store.create("") is False

        assert fake_api.calls == []
        assert store.todos == ["sentinel"]

    def test_update_patches_then_reloads(self, store, fake_api):
        store.create("buy milk")
        fake_api.calls.clear()

        store.update(1, completed=True)

        assert fake_api.calls == [("update_todo", 1, {"completed": True}), ("get_todos",)]
        assert store.todos[0].completed is True

    def test_delete_then_reloads(self, store, fake_api):
        store.create("buy milk")
        fake_api.calls.clear()

        store.delete(1)

        assert fake_api.names() == ["delete_todo", "get_todos"]
        assert store.todos == []

    def test_failed_mutation_leaves_state_untouched(self, store, fake_api):
        store.create("buy milk")
        before = list(store.todos)

        with pytest.raises(ApiError) as excinfo:
            store.update(99, completed=True)

        assert excinfo.value.status_code == 404
        assert store.todos == before
        assert fake_api.names()[-1] == "update_todo"


class TestLabels:

    def test_create_label_appends_without_reload(self, store, fake_api):
        label = store.create_label("urgent")

        assert fake_api.names() == ["add_label"]
        assert store.labels == [label]

    def test_create_existing_label_name_is_a_noop(self, store, fake_api):
        store.create_label("urgent")
        fake_api.calls.clear()

        assert store.create_label("urgent") is None

        assert fake_api.calls == []
        assert len(store.labels) == 1

    def test_delete_label_drops_it_and_reloads_todos(self, store, fake_api):
        urgent = store.create_label("urgent")
        home = store.create_label("home")
        store.create("buy milk", [urgent.id, home.id])
        fake_api.calls.clear()

        store.delete_label(urgent.id)

        assert fake_api.names() == ["delete_label", "get_todos"]
        assert store.labels == [home]
        assert store.todos[0].labels == [home]

    def test_delete_active_filter_label_clears_filter(self, store, fake_api):
        urgent = store.create_label("urgent")
        store.select_label_filter(urgent)

        store.delete_label(urgent.id)

        assert store.filter_label_id is None

    def test_delete_other_label_keeps_filter(self, store, fake_api):
        urgent = store.create_label("urgent")
        home = store.create_label("home")
        store.select_label_filter(urgent)

        store.delete_label(home.id)

        assert store.filter_label_id == urgent.id


class TestFiltering:

    def test_display_todos_follows_selected_label(self, store, fake_api):
        urgent = store.create_label("urgent")
        store.create("buy milk", [urgent.id])
        store.create("walk dog")

        store.select_label_filter(urgent)
        assert [todo.text for todo in store.display_todos] == ["buy milk"]

        store.select_label_filter(None)
        assert [todo.text for todo in store.display_todos] == ["walk dog", "buy milk"]

    def test_selecting_filter_makes_no_calls(self, store, fake_api):
        urgent = store.create_label("urgent")
        fake_api.calls.clear()

        store.select_label_filter(urgent)

        assert fake_api.calls == []
        assert store.filter_label_id == urgent.id
