"""Main FastAPI application."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from quickbite.core.logging import setup_logging
from quickbite.api import codes, health, menu, orders, reports, rooms


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    setup_logging()
    yield


app = FastAPI(
    title="QuickBite",
    description="Shared group food orders over copy-paste codes and cloud rooms",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router, tags=["health"])
app.include_router(menu.router, tags=["menu"])
app.include_router(codes.router, tags=["codes"])
app.include_router(rooms.router, tags=["rooms"])
app.include_router(orders.router, tags=["orders"])
app.include_router(reports.router, tags=["reports"])


if __name__ == "__main__":
    import uvicorn

    from quickbite.core.config import settings

    uvicorn.run("quickbite.main:app", host=settings.host, port=settings.port)
