import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app.config import LOG_LEVEL
from app.hotels.router import router as router_hotels
from app.inventory.router import router as router_inventory
from app.reservations.router import router as router_reservations
from app.room_types.router import router as router_room_types

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Hotel Backoffice API",
    description="Hotels, room types, daily room inventory and reservations.",
    version="1.0.0",
)


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "backoffice"}


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(status_code=409, content={"detail": "Request conflicts with existing data."})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(router_hotels, prefix="/api")
app.include_router(router_room_types, prefix="/api")
app.include_router(router_inventory, prefix="/api")
app.include_router(router_reservations, prefix="/api")


if __name__ == "__main__":
    uvicorn.run("app.main:app", reload=True)
