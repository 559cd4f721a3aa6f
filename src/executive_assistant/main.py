"""
FastAPI application for the executive assistant.

Exposes the dispatcher over HTTP together with configuration management,
voice input and content helper endpoints.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from executive_assistant.agent.dispatcher import AssistantDispatcher, create_dispatcher
from executive_assistant.config import load_settings
from executive_assistant.models.configuration import AppSettings
from executive_assistant.plugins.content_plugin import (
    build_weekly_content_calendar,
    generate_prompts,
    generate_viral_caption,
    get_optimal_posting_times,
    prompt_template_library,
)

logger = logging.getLogger(__name__)

VOICE_TRANSCRIPTION_PLACEHOLDER = "Voice transcription would be processed here"


class ChatRequest(BaseModel):
    """Body of a chat request."""

    model_config = ConfigDict(populate_by_name=True)

    message: Optional[str] = None
    context: Optional[Dict[str, Any]] = None
    business_context: Optional[str] = Field(default=None, alias="businessContext")


class VoiceRequest(BaseModel):
    """Body of a voice request."""

    model_config = ConfigDict(populate_by_name=True)

    audio_data: str = Field(default="", alias="audioData")
    format: Optional[str] = None


class ViralCaptionRequest(BaseModel):
    """Body of a viral caption request."""

    model_config = ConfigDict(populate_by_name=True)

    business: str
    audience: str
    post_type: Optional[str] = Field(default=None, alias="postType")


class PromptRequest(BaseModel):
    """Body of a prompt generation request."""

    model_config = ConfigDict(populate_by_name=True)

    prompt_type: Optional[str] = Field(default=None, alias="promptType")
    business: str
    audience: str
    content_goal: Optional[str] = Field(default=None, alias="contentGoal")
    style: Optional[str] = None
    context: Optional[str] = None


class ContentCalendarRequest(BaseModel):
    """Body of a content calendar request."""

    business: str
    audience: str
    weeks: int = Field(default=1, ge=1, le=52)


async def transcribe_audio(audio_data: str, audio_format: Optional[str]) -> str:
    """
    Transcribe voice input.

    LAB SIMPLIFICATION: Returns a fixed transcription.
    PRODUCTION: Call the Whispr Flow API.
    """
    return VOICE_TRANSCRIPTION_PLACEHOLDER


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Application settings. Loaded from the environment when omitted.

    Returns:
        Configured FastAPI app with its dispatcher on ``app.state.dispatcher``.
    """
    settings = settings or load_settings()
    dispatcher = create_dispatcher(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler for startup and shutdown.

        Args:
            app: FastAPI application instance.
        """
        logger.info("Starting Executive Assistant...")
        logger.info(f"  - Remote classification: {dispatcher.config_store.is_configured('openai')}")
        logger.info(f"  - Conversation log size: {dispatcher.conversation_log.max_size}")

        yield

        logger.info("Shutting down Executive Assistant...")

    app = FastAPI(
        title="Executive Assistant",
        description="Intent-routed executive assistant for multi-business operations",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.dispatcher = dispatcher

    _register_routes(app)
    return app


def _dispatcher(request: Request) -> AssistantDispatcher:
    return request.app.state.dispatcher


def _register_routes(app: FastAPI) -> None:
    """Register HTTP routes on the app."""

    @app.get("/health")
    async def health_check():
        """
        Health check endpoint.

        Returns:
            Status information.
        """
        return {"status": "healthy", "service": "Executive Assistant"}

    @app.post("/api/chat")
    async def chat(body: ChatRequest, request: Request):
        """
        Dispatch a chat message.

        Returns:
            The dispatch envelope. HTTP 500 when processing failed.
        """
        result = await _dispatcher(request).dispatch(
            body.message,
            context=body.context,
            business_context=body.business_context
        )
        status_code = 200 if result.success else 500
        return JSONResponse(status_code=status_code, content=result.to_dict())

    @app.post("/api/voice/process")
    async def process_voice(body: VoiceRequest, request: Request):
        """
        Transcribe voice input and dispatch it as a chat message.

        Returns:
            Transcription and response. HTTP 503 when voice is not configured.
        """
        dispatcher = _dispatcher(request)
        if not dispatcher.config_store.is_configured("whispr"):
            return JSONResponse(
                status_code=503,
                content={"success": False, "error": "Voice processing not configured"}
            )

        transcription = await transcribe_audio(body.audio_data, body.format)
        result = await dispatcher.dispatch(transcription, context={"source": "voice"})
        if not result.success:
            return JSONResponse(status_code=500, content={"success": False, "error": "Voice processing failed"})

        return {
            "success": True,
            "transcription": transcription,
            "response": result.response,
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    @app.get("/api/config/status")
    async def config_status(request: Request):
        """
        Report which external services are configured.

        Returns:
            Per-service configuration status.
        """
        return {"success": True, "status": _dispatcher(request).config_store.status()}

    @app.post("/api/config/{service_name}")
    async def update_config(service_name: str, body: Dict[str, Any], request: Request):
        """
        Update credentials for a service at runtime.

        Returns:
            Confirmation message. HTTP 400 on invalid input, HTTP 500 when the
            settings cannot be persisted.
        """
        dispatcher = _dispatcher(request)
        try:
            dispatcher.config_store.update(service_name, body)
        except ValueError as e:
            return JSONResponse(status_code=400, content={"success": False, "error": str(e)})
        except OSError as e:
            logger.error(f"{service_name} config error: {e}")
            return JSONResponse(
                status_code=500,
                content={"success": False, "error": f"Failed to update {service_name} configuration"}
            )

        if service_name == "openai":
            dispatcher.reconfigure()

        return {"success": True, "message": f"{service_name} configuration updated."}

    @app.get("/api/conversations")
    async def list_conversations(request: Request, limit: int = Query(default=50, ge=1, le=1000)):
        """
        Return the most recent conversation records.

        Returns:
            Records, oldest first.
        """
        records = await _dispatcher(request).conversation_log.recent(limit)
        return {
            "success": True,
            "count": len(records),
            "conversations": [record.to_dict() for record in records]
        }

    @app.post("/api/content/viral-caption")
    async def viral_caption(body: ViralCaptionRequest):
        """
        Generate a viral caption for a business and audience.

        Returns:
            Caption and posting guidance.
        """
        return {"success": True, **generate_viral_caption(body.business, body.audience, body.post_type)}

    @app.post("/api/prompts/generate")
    async def prompts_generate(body: PromptRequest):
        """
        Fill a prompt family for a business and audience.

        Returns:
            Prompts and what they were generated for.
        """
        result = generate_prompts(
            body.prompt_type,
            body.business,
            body.audience,
            content_goal=body.content_goal,
            style=body.style,
            context=body.context
        )
        return {"success": True, **result, "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.get("/api/prompts/templates")
    async def prompt_templates():
        """Return the prompt template library."""
        return {"success": True, **prompt_template_library()}

    @app.post("/api/content/calendar")
    async def content_calendar(body: ContentCalendarRequest):
        """
        Plan content for one or more weeks.

        Returns:
            Calendar entries and the total number of posts.
        """
        calendar = build_weekly_content_calendar(body.business, body.audience, body.weeks)
        return {
            "success": True,
            "calendar": calendar,
            "totalPosts": len(calendar),
            "business": body.business,
            "audience": body.audience,
            "weeks": body.weeks
        }

    @app.get("/api/content/optimal-times")
    async def optimal_times(
        audience: Optional[str] = None,
        platform: Optional[str] = None,
        timezone_name: Optional[str] = Query(default=None, alias="timezone")
    ):
        """Return posting times per weekday for a platform and audience."""
        return {"success": True, **get_optimal_posting_times(platform, audience, timezone_name)}
