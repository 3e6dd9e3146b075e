from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from dotenv import load_dotenv

# Load .env variables
load_dotenv()

# Configure base logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger("app")

from app.routers import auth, users, routes, reservations
from app.database import engine, Base, SessionLocal
from app.exception_handlers import register_exception_handlers
from app.init_db import create_initial_admin
import uvicorn


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)

    logger.info("Initializing database with admin user...")
    db = SessionLocal()
    try:
        create_initial_admin(db)
    finally:
        db.close()

    yield

    logger.info("Disposing database engine...")
    engine.dispose()


app = FastAPI(
    title="Caminante API",
    description="API for bus routes, users and seat reservations",
    version="1.0.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[os.getenv("CORS_ORIGIN", "http://localhost:5173")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router, prefix="/auth", tags=["authentication"])
app.include_router(users.router, prefix="/users", tags=["users"])
app.include_router(routes.router, prefix="/routes", tags=["routes"])
app.include_router(
    reservations.router, prefix="/my-reservations", tags=["reservations"]
)


@app.get("/")
def read_root():
    return {"message": "Welcome to Caminante API"}


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=int(os.getenv("PORT", "3000")))
