import logging
from typing import Iterable, List, Optional

import requests

from todo_app.config import settings
from todo_app.api.todo.schemas import TodoOut
from todo_app.api.label.schemas import LabelOut

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised for any non-2xx response from the todo API."""

    def __init__(self, status_code: int, detail):
        super().__init__(f"[{status_code}] {detail}")
        self.status_code = status_code
        self.detail = detail


class TodoApiClient:
    """Thin wrapper over the ``/todos`` and ``/labels`` endpoints.

    ``session`` only needs ``get``/``post``/``patch``/``delete`` returning
    objects with ``status_code`` and ``json()``, so a ``requests.Session``
    and FastAPI's ``TestClient`` are interchangeable here.
    """

    def __init__(self, base_url: Optional[str] = None, session=None):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.session = session if session is not None else requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _send(self, method: str, path: str, json=None):
        logger.debug("%s %s", method.upper(), path)
        kwargs = {} if json is None else {"json": json}
        response = getattr(self.session, method)(self._url(path), **kwargs)
        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            detail = body.get("detail", body) if isinstance(body, dict) else body
            logger.warning("%s %s failed: %s %s", method.upper(), path, response.status_code, detail)
            raise ApiError(response.status_code, detail)
        return response

    # Todos

    def get_todos(self) -> List[TodoOut]:
        response = self._send("get", "/todos")
        return [TodoOut.model_validate(item) for item in response.json()]

    def get_todo(self, todo_id: int) -> TodoOut:
        return TodoOut.model_validate(self._send("get", f"/todos/{todo_id}").json())

    def add_todo(self, text: str, label_ids: Iterable[int] = ()) -> TodoOut:
        payload = {"text": text, "label_ids": list(label_ids)}
        return TodoOut.model_validate(self._send("post", "/todos", json=payload).json())

    def update_todo(self, todo_id: int, **changes) -> TodoOut:
        payload = {key: value for key, value in changes.items() if value is not None}
        if "label_ids" in payload:
            payload["label_ids"] = list(payload["label_ids"])
        response = self._send("patch", f"/todos/{todo_id}", json=payload)
        return TodoOut.model_validate(response.json())

    def delete_todo(self, todo_id: int) -> None:
        self._send("delete", f"/todos/{todo_id}")

    # Labels

    def get_labels(self) -> List[LabelOut]:
        response = self._send("get", "/labels")
        return [LabelOut.model_validate(item) for item in response.json()]

    def add_label(self, name: str) -> LabelOut:
        return LabelOut.model_validate(self._send("post", "/labels", json={"name": name}).json())

    def delete_label(self, label_id: int) -> None:
        self._send("delete", f"/labels/{label_id}")
