"""
FastAPI application entry point
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from landing_backend.app.api.v1.applications import routes as applications
from landing_backend.app.api.v1.blogs import routes as blogs
from landing_backend.app.api.v1.card_configurations import routes as card_configurations
from landing_backend.app.api.v1.curriculums import routes as curriculums
from landing_backend.app.api.v1.skills import routes as skills
from landing_backend.app.api.v1.solutions import routes as solutions
from landing_backend.app.api.v1.users import routes as users
from landing_backend.app.api.v1.vacancies import routes as vacancies
from landing_backend.app.api.v1.work_experiences import routes as work_experiences
from landing_backend.app.core.config import settings
from landing_backend.app.core.error_handlers import register_exception_handlers
from landing_backend.app.core.logging_config import get_logger, setup_logging
from landing_backend.app.core.middleware import register_request_logging
from landing_backend.app.db.base import Base
from landing_backend.app.db.session import engine

# Import models so they register with Base.metadata
import landing_backend.app.models  # noqa: F401

setup_logging()
logger = get_logger("main")

# Create database tables (alembic owns schema changes; this covers fresh local databases)
Base.metadata.create_all(bind=engine)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Portfolio and recruiting landing site API",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
register_request_logging(app)

# Include routers
api_prefix = f"/{settings.api_prefix.strip('/')}" if settings.api_prefix.strip("/") else ""
for module in (
    vacancies,
    applications,
    users,
    card_configurations,
    curriculums,
    skills,
    work_experiences,
    blogs,
    solutions,
):
    app.include_router(module.router, prefix=api_prefix)

logger.info("Application ready name=%s version=%s api_prefix=%s", settings.app_name, settings.app_version, api_prefix)


@app.get("/")
def read_root():
    """Root endpoint"""
    return {"message": settings.app_name, "version": settings.app_version}


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
