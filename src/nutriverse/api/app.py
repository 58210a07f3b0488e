"""FastAPI application factory."""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from nutriverse.api.food_models import serialize_category_summary, serialize_featured
from nutriverse.api.foods import router as foods_router
from nutriverse.app_logging import configure_logging
from nutriverse.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    app = FastAPI(title="NutriVerse")
    app.state.container = container

    app.include_router(foods_router)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    # A malformed body is the client's fault, so this answers 400 where a
    # catch-all would have answered 500 with the same message.
    @app.exception_handler(RequestValidationError)
    async def validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Failed to process request"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/filters")
    async def filters(request: Request) -> dict[str, list[str]]:
        """Return the values offered by filter controls."""
        state_container: AppContainer = request.app.state.container
        return state_container.food_service.filter_options()

    @app.get("/featured")
    async def featured(request: Request) -> dict[str, object]:
        """Return a food of the day and a few featured foods."""
        state_container: AppContainer = request.app.state.container
        picked = state_container.food_service.featured()
        if picked is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="No foods available"
            )
        return serialize_featured(picked)

    @app.get("/categories/{category}/summary")
    async def category_summary(category: str, request: Request) -> dict[str, object]:
        """Return count and average macros for a category."""
        state_container: AppContainer = request.app.state.container
        summary = state_container.food_service.category_summary(category)
        if summary is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Category not found"
            )
        return serialize_category_summary(summary)

    return app
