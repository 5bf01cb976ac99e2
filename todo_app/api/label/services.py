import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from todo_app.db.models.label import Label
from . import schemas

logger = logging.getLogger(__name__)


class DuplicateLabelError(Exception):
    def __init__(self, label_id: int):
        super().__init__(f"Duplicate label (id: {label_id})")
        self.label_id = label_id


def create_label(db: Session, label: schemas.LabelCreate):
    existing = get_label_by_name(db, label.name)
    if existing:
        raise DuplicateLabelError(existing.id)

    db_label = Label(**label.model_dump())
    db.add(db_label)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent insert of the same name
        db.rollback()
        existing = get_label_by_name(db, label.name)
        if existing is None:
            raise
        raise DuplicateLabelError(existing.id)
    db.refresh(db_label)
    logger.info("Created label %s (%r)", db_label.id, db_label.name)
    return db_label

def get_labels(db: Session):
    return db.query(Label).order_by(Label.id.asc()).all()

def get_label(db: Session, label_id: int):
    return db.query(Label).filter(Label.id == label_id).first()

def get_label_by_name(db: Session, name: str):
    return db.query(Label).filter(Label.name == name).first()

def delete_label(db: Session, label_id: int):
    db_label = get_label(db, label_id)
    if db_label:
        db.delete(db_label)
        db.commit()
        logger.info("Deleted label %s", label_id)
    return db_label
