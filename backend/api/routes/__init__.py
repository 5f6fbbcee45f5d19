from fastapi import FastAPI

from api.routes import backups, health, notifications, youtube


def register_routes(app: FastAPI) -> None:
    app.include_router(health.router)
    app.include_router(notifications.router)
    app.include_router(backups.router)
    app.include_router(youtube.router)
