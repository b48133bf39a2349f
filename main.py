# main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from config import load_settings
from database import init_db, close_db
from Services.customer_router import router as customer_router
from Services.employee_router import router as employee_router
import logging

settings = load_settings()

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

# Initialize the database on startup, release connections on shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Environment: {settings.environment}")
    logger.info("Initializing database...")
    try:
        init_db(settings.database_url)
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}", exc_info=True)
        raise
    yield
    close_db()

# Create FastAPI app
app = FastAPI(
    title="Scaffolding Rental API",
    description="""
    API for managing the scaffolding rental business records:
    - Customer management (with soft delete)
    - Employee management
    """,
    version="1.0.0",
    lifespan=lifespan
)

# Single allowed origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.allowed_origin],
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

# Exception handler for unexpected errors
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Error processing request {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc), "type": type(exc).__name__}
    )

# Include routers
app.include_router(
    customer_router,
    prefix="/Customer",
    tags=["customers"]
)

app.include_router(
    employee_router,
    prefix="/employee",
    tags=["employees"]
)

@app.get("/")
async def root():
    return {
        "message": "Welcome to Scaffolding Rental API",
        "version": "1.0.0",
        "docs_url": "/docs",
        "redoc_url": "/redoc"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8080, log_level=settings.log_level.lower())
