# init_db.py

from todo_app.db.session import Base, engine
import todo_app.db.models  # noqa: F401


def init():
    print(f"Connecting to database {engine.url.render_as_string(hide_password=True)}...")

    print("Creating tables (if not exist)...")
    Base.metadata.create_all(bind=engine)

    print("Done.")


if __name__ == "__main__":
    init()
