import logging
from fastapi import FastAPI
from weekplanner import config
from weekplanner.routes import schedule
from weekplanner.services.scheduler_service import SchedulerService
from weekplanner.services.travel_time import TravelTimeService

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


def create_app(scheduler_service: SchedulerService = None) -> FastAPI:
    """Create the API; tests pass their own service to avoid real lookups."""
    app = FastAPI(
        title="Week Planner API",
        description="Travel-aware weekly scheduling and event conflict checks",
        version="1.0.0"
    )
    app.state.scheduler_service = scheduler_service or SchedulerService(TravelTimeService())

    app.include_router(schedule.router, prefix="/events", tags=["events"])

    @app.get("/")
    def read_root():
        """Root endpoint with API information"""
        return {
            "message": "Welcome to Week Planner API",
            "version": "1.0.0",
            "endpoints": {
                "optimize": "POST /events/optimize - Build a Monday-Friday schedule",
                "conflict": "POST /events/conflict - Check two events for a conflict",
                "travel_cache": "DELETE /events/travel-cache - Clear cached travel times"
            },
            "swagger_ui": "/docs - Interactive API documentation",
            "redoc": "/redoc - Alternative API documentation"
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "message": "API is running"}

    return app


app = create_app()

# This allows running the app directly with: python -m weekplanner.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("weekplanner.main:app", host=config.HOST, port=config.PORT, reload=True)
