from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from todo_app.db.session import get_db
from . import schemas, services

router = APIRouter()


def _unknown_labels(e: services.UnknownLabelError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"message": "Unknown label ids", "label_ids": e.label_ids},
    )


@router.post("", response_model=schemas.TodoOut, status_code=status.HTTP_201_CREATED)
def create_todo(
    todo: schemas.TodoCreate,
    db: Session = Depends(get_db),
):
    try:
        return services.create_todo(db, todo)
    except services.UnknownLabelError as e:
        db.rollback()
        raise _unknown_labels(e)

@router.get("", response_model=list[schemas.TodoOut])
def all_todos(db: Session = Depends(get_db)):
    return services.get_todos(db)

@router.get("/{todo_id}", response_model=schemas.TodoOut)
def find_todo(
    todo_id: int,
    db: Session = Depends(get_db),
):
    todo = services.get_todo(db, todo_id)
    if not todo:
        raise HTTPException(status_code=404, detail="Todo not found")
    return todo

@router.patch("/{todo_id}", response_model=schemas.TodoOut)
def update_todo(
    todo_id: int,
    todo: schemas.TodoUpdate,
    db: Session = Depends(get_db),
):
    try:
        updated = services.update_todo(db, todo_id, todo)
    except services.UnknownLabelError as e:
        db.rollback()
        raise _unknown_labels(e)
    if not updated:
        raise HTTPException(status_code=404, detail="Todo not found")
    return updated

@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_todo(
    todo_id: int,
    db: Session = Depends(get_db),
):
    deleted = services.delete_todo(db, todo_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Todo not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
