import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from core import db, errors
from core.settings import get_settings
from employees import router as employees_router
from employees import schemas as employees_schemas

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Open the DB pool once per process; handlers receive it via db.get_pool.
    app.state.pool = await db.open_pool(get_settings())
    try:
        yield
    finally:
        await db.close_pool(app.state.pool)
        app.state.pool = None


app = FastAPI(lifespan=lifespan)
errors.install_handlers(
    app,
    body_message=employees_schemas.INVALID_EMPLOYEE_DATA,
    path_message=employees_schemas.INVALID_EMPLOYEE_ID,
)

app.include_router(employees_router.router, tags=["employees"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "employee records api"}


def run() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    logger.info("starting employee records api port=%s", settings.http_port)
    uvicorn.run(app, host="0.0.0.0", port=settings.http_port)


if __name__ == "__main__":
    run()
