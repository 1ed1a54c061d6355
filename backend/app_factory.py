"""
Application factory for FastAPI app creation and service initialization.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import os
from dotenv import load_dotenv

# Core infrastructure imports
from core.middleware import ExceptionHandlingMiddleware, RequestLoggingMiddleware
from config import Settings, setup_logging, get_settings, get_app_logger

# Service imports
from services.unit_service import UnitService

# Router imports
from routers.root import RootRouter
from routers.health import HealthRouter
from routers.master import MasterRouter


class AppFactory:
    """Factory for creating and configuring the FastAPI application."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings
        self.unit_service: UnitService = None
        self.routers = []
        self.logger = None

    def initialize_logging(self):
        """Initialize logging system."""
        if self.settings is None:
            self.settings = get_settings()
        setup_logging(self.settings.log_level.value, self.settings.log_file)
        self.logger = get_app_logger()

    def initialize_services(self):
        """Initialize application services."""
        if not self.logger:
            self.initialize_logging()

        self.logger.info(f"Starting {self.settings.app_name} API...")
        self.logger.info(f"Environment: {self.settings.environment.value}")
        self.logger.info(f"Debug mode: {self.settings.debug}")
        self.logger.info(f"Current working directory: {os.getcwd()}")

        try:
            self.unit_service = UnitService(self.settings.upload)
            self.logger.info(f"Unit service initialized (upload path: {self.settings.upload.upload_path})")
        except Exception as e:
            self.logger.error(f"Failed to initialize services: {str(e)}")
            raise

    def initialize_routers(self):
        """Initialize all routers with dependency injection."""
        self.logger.info("Initializing routers...")

        root_router = RootRouter(version=self.settings.app_version)
        health_router = HealthRouter(
            version=self.settings.app_version,
            environment=self.settings.environment.value
        )
        master_router = MasterRouter()

        self.routers = [root_router, health_router, master_router]
        for router in self.routers:
            router.set_services(self.unit_service)

        self.logger.info(f"{len(self.routers)} routers initialized")

    def create_middleware(self, app: FastAPI):
        """Add middleware to the FastAPI application."""
        self.logger.info("Setting up middleware...")

        # Exception handling sits inside request logging so every path is logged first
        app.add_middleware(ExceptionHandlingMiddleware)
        app.add_middleware(RequestLoggingMiddleware)
        self.logger.info("Exception handling and request logging middleware added")

        app.add_middleware(
            CORSMiddleware,
            allow_origins=self.settings.security.allow_origins,
            allow_credentials=self.settings.security.allow_credentials,
            allow_methods=self.settings.security.allow_methods,
            allow_headers=self.settings.security.allow_headers,
        )
        self.logger.info("CORS middleware added")

    def register_routes(self, app: FastAPI):
        """Register all routes with the FastAPI application."""
        self.logger.info("Registering routes...")

        for router in self.routers:
            app.include_router(router.get_router())
            self.logger.info(f"{router.__class__.__name__} routes registered")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    logger = app.state.app_factory.logger
    logger.info("Application startup completed!")

    yield

    logger.info("Application shutdown completed!")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the cached environment settings

    Returns:
        Configured FastAPI application
    """
    load_dotenv()

    app_factory = AppFactory(settings)
    app_factory.initialize_logging()
    settings = app_factory.settings

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Unit Master administration API",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        debug=settings.debug
    )

    app_factory.initialize_services()
    app_factory.initialize_routers()
    app_factory.create_middleware(app)
    app_factory.register_routes(app)

    app.state.app_factory = app_factory

    logger = app_factory.logger
    logger.info("FastAPI application created successfully!")
    logger.info(f"  - Name: {settings.app_name}")
    logger.info(f"  - Version: {settings.app_version}")
    logger.info(f"  - Routers: {len(app_factory.routers)}")

    return app
