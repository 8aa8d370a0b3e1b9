"""FastAPI app serving the consolidated weather report."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from weatherdesk.config.schema import AppConfig
from weatherdesk.errors import UpstreamError
from weatherdesk.ingest.http_client import build_http_client
from weatherdesk.pipeline.report_pipeline import ReportPipeline

logger = logging.getLogger(__name__)


def create_app(
    config: AppConfig | None = None, pipeline: ReportPipeline | None = None
) -> FastAPI:
    """Build the app. A pre-built pipeline skips creating the HTTP client."""
    config = config or AppConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if pipeline is not None:
            app.state.pipeline = pipeline
            yield
            return
        client = build_http_client(config.upstream)
        app.state.pipeline = ReportPipeline.from_config(config, client)
        try:
            yield
        finally:
            client.close()

    app = FastAPI(title="weatherdesk", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/weather")
    def get_weather(request: Request):
        """Location, current conditions, 7-day forecast and history."""
        report_pipeline: ReportPipeline = request.app.state.pipeline
        client_ip = None
        if config.server.use_client_ip and request.client is not None:
            client_ip = request.client.host
        try:
            report = report_pipeline.produce_report(client_ip=client_ip)
        except UpstreamError as e:
            logger.error("Weather report failed (%d): %s", e.status_code, e)
            raise HTTPException(e.status_code, str(e)) from e
        return report.to_dict()

    @app.get("/health")
    def get_health():
        return {"status": "ok"}

    return app
