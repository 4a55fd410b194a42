import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.responses import JSONResponse

from tamagotchi_api.crud import CreateData
from tamagotchi_api.db import engine
from tamagotchi_api.load_secrets import create_tables, log_level
from tamagotchi_api.routers import pets
from tamagotchi_api.services.errors import ConcurrencyConflictError

logging.basicConfig(level=log_level)
logging.getLogger("aiosqlite").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app):
    """Create the tables if needed.
    This function is called to start the server.
    """
    if create_tables:
        await CreateData.create_table()
    logging.info("Start Server")
    try:
        yield
    finally:
        await engine.dispose()
        logging.info("Stop Server")


app = FastAPI(
    title="Tamagotchi API",
    version="0.1.0",
    description="Virtual pets and their feedings, playtimes and scoldings",
    lifespan=lifespan,
)


@app.exception_handler(ConcurrencyConflictError)
async def concurrency_conflict_handler(request: Request, exc: ConcurrencyConflictError):
    logging.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


api_router = APIRouter(prefix="/api")
api_router.include_router(pets.pets_router)
app.include_router(api_router)


@app.get("/", tags=["Root"])
async def read_root():
    return {"status": "Tamagotchi API is running"}


# if __name__ == "__main__":
#     uvicorn.run(app, host="0.0.0.0", port=8080, reload=True)
