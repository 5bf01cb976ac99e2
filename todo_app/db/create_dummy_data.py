from sqlalchemy.orm import Session
from todo_app.db.models import Todo, Label, TodoLabel

def seed_todos(db: Session):
    # Labels
    urgent = Label(name="Urgent")
    home = Label(name="Home")
    work = Label(name="Work")
    db.add_all([urgent, home, work])
    db.flush()  # to get IDs

    # Todos
    todos = [
        Todo(text="Fix login issue", completed=False),
        Todo(text="Plan Q3 roadmap", completed=True),
        Todo(text="Buy groceries", completed=False),
        Todo(text="Pay bills", completed=True),
        Todo(text="Read a book", completed=False),
    ]
    db.add_all(todos)
    db.flush()

    # Attach labels
    todo_label_map = [
        (todos[0], [urgent, work]),
        (todos[1], [work]),
        (todos[2], [home]),
        (todos[3], [urgent, home]),
    ]

    for todo, labels in todo_label_map:
        for label in labels:
            db.add(TodoLabel(todo_id=todo.id, label_id=label.id))

    db.commit()

if __name__ == "__main__":
    from todo_app.db.session import SessionLocal

    db = SessionLocal()
    try:
        if db.query(Todo).first():
            print("Todos already present, skipping seed.")
        else:
            seed_todos(db)
            print("Seeded todos and labels.")
    finally:
        db.close()
