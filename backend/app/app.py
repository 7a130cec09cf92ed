"""FastAPI application."""

import argparse
from typing import Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from configs import settings
from src.controllers.summary_controllers import summary_router
from src.logger_config import configure_logging, get_logger

configure_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Build the API with the summary router mounted."""
    logger.info("Starting FastAPI application...")
    application = FastAPI(
        title="Chat Summary API",
        root_path=settings.ROOT_PATH_BACKEND,
        description="Conversation summarization and model resolution endpoints",
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(summary_router)

    @application.get("/", response_description="Api healthcheck")  # type: ignore[misc]
    async def index() -> Dict[str, str]:
        """Define a route for handling HTTP GET requests to the root URL ("/")."""
        return {"status": "ok"}

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    parser = argparse.ArgumentParser()
    parser.add_argument("--host", required=True, help="Application host.")
    parser.add_argument("--port", required=True, help="Application port.")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development purposes.",
    )
    args = parser.parse_args()
    uvicorn.run("app:app", host=args.host, port=int(args.port), reload=args.reload)
