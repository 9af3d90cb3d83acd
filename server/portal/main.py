from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portal.context import PortalContext, build_context
from portal.services.seed import initialize_data


def create_app(context: Optional[PortalContext] = None) -> FastAPI:
    context = context or build_context()
    settings = context.settings

    # Initialize FastAPI app
    app = FastAPI(
        title=settings.app_name,
        version=settings.api_version,
        debug=settings.debug
    )
    app.state.context = context

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def startup_event():
        """Prepare collections and start the sync loop on startup"""
        context.connector.initialize_if_empty()
        if settings.seed_demo_data:
            initialize_data(context.connector)

        print(f"🚀 {settings.app_name} is starting...")
        print(f"📚 Storage backend: {settings.storage_backend}")

        if settings.auto_sync_enabled:
            context.scheduler.start()

    @app.on_event("shutdown")
    async def shutdown_event():
        await context.scheduler.stop()
        context.storage.backend.close()
        print("👋 Storage closed")

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.api_version,
            "status": "running"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "storage": "available" if context.storage.available else "unavailable",
            "sync": "running" if context.scheduler.running else "stopped",
        }

    # Import and include routers
    from portal.routes import admin, connector, faculty, student, sync

    app.include_router(connector.router, prefix="/api/connector", tags=["Connector"])
    app.include_router(student.router, prefix="/api/student", tags=["Student"])
    app.include_router(faculty.router, prefix="/api/faculty", tags=["Faculty"])
    app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])
    app.include_router(sync.router, prefix="/api/sync", tags=["Sync"])

    return app


app = create_app()
