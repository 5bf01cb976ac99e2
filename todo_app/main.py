import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from todo_app.config import settings
import todo_app.db.models  # noqa: F401  (registers tables on Base.metadata)
from todo_app.api.todo.routes import router as todo_router
from todo_app.api.label.routes import router as label_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s:%(name)s: %(message)s",
)

app = FastAPI(title="Todo App")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["Content-Type"],
)

# Routers
app.include_router(todo_router, prefix="/todos", tags=["Todos"])
app.include_router(label_router, prefix="/labels", tags=["Labels"])

@app.get("/", response_class=PlainTextResponse)
def root():
    return "Hello, World!"
