from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
import logging

from config.logging import setup_logging
from config.env import settings
from database import init_db
from routers import editor_sessions, html_documents

# Set up logging
setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version
)

@app.on_event("startup")
async def startup_event():
    """Create database tables on startup."""
    try:
        logger.info("Initializing database...")
        init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize server: {str(e)}")
        raise

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allows all origins
    allow_credentials=True,
    allow_methods=["*"],  # Allows all methods
    allow_headers=["*"],  # Allows all headers
)

# Include routers
app.include_router(editor_sessions.router, prefix="/api/sessions", tags=["sessions"])
app.include_router(html_documents.router, prefix="/api/sessions", tags=["html"])

@app.get("/")
async def root():
    return {"message": "Welcome to the Spec Cards API"}

if __name__ == "__main__":
    logger.info("Starting Spec Cards API server")
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
