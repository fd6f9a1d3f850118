import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

# OpenTelemetry Imports (Basic Setup)
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from strawberry.fastapi import GraphQLRouter

from swapi_graphql.core.config import settings
from swapi_graphql.graphql.schema import Context, registry, schema
from swapi_graphql.logging_config import setup_logging
from swapi_graphql.services.swapi_client import SwapiClient

# Call setup_logging early, before creating app or loggers
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# --- Rate Limiting Setup ---
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.RATE_LIMIT],
    enabled=settings.RATE_LIMIT_ENABLED,
)


def setup_opentelemetry(app: FastAPI):
    if settings.OPENTELEMETRY_ENABLED:
        logger.info("Setting up OpenTelemetry")
        resource = Resource(attributes={SERVICE_NAME: "SwapiGraphQL"})

        provider = TracerProvider(resource=resource)
        trace.set_tracer_provider(provider)

        if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
            endpoint = settings.OTEL_EXPORTER_OTLP_ENDPOINT
            logger.info(f"Configuring OTLP Exporter to: {endpoint}/v1/traces")
            exporter = OTLPSpanExporter(endpoint=f"{endpoint.strip('/')}/v1/traces")
        else:
            logger.warning("OTEL_EXPORTER_OTLP_ENDPOINT not set. Defaulting to ConsoleSpanExporter.")
            exporter = ConsoleSpanExporter()
        provider.add_span_processor(BatchSpanProcessor(exporter))

        FastAPIInstrumentor.instrument_app(app)
        logger.info("OpenTelemetry setup complete.")
    else:
        logger.info("OpenTelemetry tracing is disabled via OPENTELEMETRY_ENABLED setting.")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_opentelemetry(app)
    swapi = SwapiClient(settings.SWAPI_BASE_URL, timeout=settings.SWAPI_TIMEOUT_SECONDS)
    app.state.swapi = swapi
    logger.info(
        "Application startup complete.",
        extra={"props": {"swapi_base_url": settings.SWAPI_BASE_URL}},
    )
    yield
    await swapi.aclose()
    logger.info("Application shutdown.")


async def get_context(request: Request) -> Context:
    """Creates the per-request GraphQL context."""
    return Context(
        swapi=request.app.state.swapi,
        registry=registry,
        strict_global_ids=settings.STRICT_GLOBAL_ID_TYPES,
    )


app = FastAPI(title="SWAPI GraphQL", lifespan=lifespan)

# --- Add Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# --- GraphQL Setup ---
graphql_app: GraphQLRouter = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphql_ide="graphiql" if settings.GRAPHIQL_ENABLED else None,
)
app.include_router(graphql_app, prefix="/graphql")


@app.get("/")
async def read_root():
    logger.info("Root endpoint called")
    return {"message": "Welcome to the SWAPI GraphQL API", "graphql": "/graphql"}


@app.get("/health")
async def health_check():
    logger.debug("Health check endpoint called")
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting Uvicorn directly for local testing")
    uvicorn.run(app, host="0.0.0.0", port=8000)
