"""HTTP server - context engine endpoints for the dashboard and external agents."""

from contextlib import asynccontextmanager

import pydantic
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from app.container import Container
from app.services.context import ContextEngine
from web.api import context
from web.api.context.schemas import ErrorResponse
from web.api.errors import ApiError, ValidationError
from web.mcp import ContextTools
from web.mcp.schemas import McpRequest, ToolCallParams

router = APIRouter(prefix="/api")


def get_engine(request: Request) -> ContextEngine:
    return request.app.state.container.context_engine


def get_tools(request: Request) -> ContextTools:
    return request.app.state.tools


def _dump(model) -> dict:
    return model.model_dump(mode="json", by_alias=True)


@router.get("/context-engine")
async def context_engine_query(
    action: str | None = None,
    table: str | None = None,
    key: str | None = None,
    engine: ContextEngine = Depends(get_engine),
) -> dict:
    """Dashboard reads: action = query | query_all | schema | info."""
    if action == "query":
        return _dump(context.query_context(engine, table, key))
    if action == "query_all":
        return _dump(context.query_all_context(engine, table))
    if action == "schema":
        return _dump(context.get_table_schema(engine, table))
    if action == "info":
        return _dump(context.get_tables_info(engine))
    raise ValidationError("Invalid action")


@router.post("/context-engine")
async def context_engine_tools(body: McpRequest, tools: ContextTools = Depends(get_tools)) -> dict:
    """Tool-call protocol endpoint: tools/list and tools/call."""
    if body.method == "tools/list":
        return {"tools": tools.list_tools()}
    if body.method == "tools/call":
        try:
            params = ToolCallParams.model_validate(body.params)
        except pydantic.ValidationError as e:
            raise ValidationError("tools/call requires params.name") from e
        return tools.call(params.name, params.arguments)
    raise ValidationError(f"Unknown method: {body.method}")


@router.get("/health")
async def health(engine: ContextEngine = Depends(get_engine)) -> dict:
    return _dump(context.get_health(engine))


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=_dump(ErrorResponse(error=message)))


def _describe_invalid_request(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON body"
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"Invalid request: {field} {first.get('msg', '').lower()}".rstrip()


def create_app(container: Container | None = None) -> FastAPI:
    """Build the FastAPI app; the container is started and stopped by the lifespan."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        c = container if container is not None else Container()
        app.state.container = c
        try:
            await c.start()
            app.state.tools = ContextTools(c.context_engine)
            logger.info("Context engine API ready")
            yield
        finally:
            await c.shutdown()

    app = FastAPI(title="Feedback Context Engine", lifespan=lifespan)
    app.include_router(router)

    @app.exception_handler(ApiError)
    async def api_error_handler(_request: Request, exc: ApiError) -> JSONResponse:
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error_response(400, _describe_invalid_request(exc))

    @app.exception_handler(Exception)
    async def unexpected_handler(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception("[Context Engine API] Error: {}", exc)
        return _error_response(500, "Internal server error")

    return app
