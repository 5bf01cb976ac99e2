import logging
from typing import Iterable, List

from sqlalchemy.orm import Session, selectinload
from todo_app.db.models.todo import Todo
from todo_app.db.models.label import Label
from todo_app.db.models.todo_label import TodoLabel
from . import schemas

logger = logging.getLogger(__name__)


class UnknownLabelError(Exception):
    def __init__(self, label_ids: List[int]):
        super().__init__(f"Unknown label ids: {label_ids}")
        self.label_ids = label_ids


def _todo_query(db: Session):
    return db.query(Todo).options(
        selectinload(Todo.todo_labels).selectinload(TodoLabel.label)
    )

def _build_todo_labels(db: Session, label_ids: Iterable[int], current: Iterable[TodoLabel] = ()) -> List[TodoLabel]:
    # First-seen order, no repeats. Linked rows are reused: (todo_id, label_id) is unique.
    wanted = list(dict.fromkeys(label_ids))
    if not wanted:
        return []
    found = {
        label.id: label
        for label in db.query(Label).filter(Label.id.in_(wanted)).all()
    }
    missing = [label_id for label_id in wanted if label_id not in found]
    if missing:
        raise UnknownLabelError(missing)
    kept = {todo_label.label_id: todo_label for todo_label in current}
    return [kept.get(label_id) or TodoLabel(label=found[label_id]) for label_id in wanted]


def create_todo(db: Session, todo: schemas.TodoCreate):
    db_todo = Todo(text=todo.text, completed=False)
    db_todo.todo_labels = _build_todo_labels(db, todo.label_ids)
    db.add(db_todo)
    db.commit()
    logger.info("Created todo %s", db_todo.id)
    return get_todo(db, db_todo.id)

def get_todos(db: Session):
    return _todo_query(db).order_by(Todo.id.desc()).all()

def get_todo(db: Session, todo_id: int):
    return _todo_query(db).filter(Todo.id == todo_id).first()

def update_todo(db: Session, todo_id: int, todo: schemas.TodoUpdate):
    db_todo = get_todo(db, todo_id)
    if db_todo:
        update_data = todo.model_dump(exclude_unset=True, exclude_none=True)
        label_ids = update_data.pop("label_ids", None)
        if label_ids is not None:
            db_todo.todo_labels = _build_todo_labels(db, label_ids, db_todo.todo_labels)
        for key, value in update_data.items():
            setattr(db_todo, key, value)
        db.commit()
        logger.info("Updated todo %s (%s)", todo_id, ", ".join(sorted(todo.model_fields_set)))
        db_todo = get_todo(db, todo_id)
    return db_todo

def delete_todo(db: Session, todo_id: int):
    db_todo = get_todo(db, todo_id)
    if db_todo:
        db.delete(db_todo)
        db.commit()
        logger.info("Deleted todo %s", todo_id)
    return db_todo
