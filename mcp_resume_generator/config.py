"""Runtime configuration for the resume generator MCP server.

Values are loaded from the environment (and `.env` via python-dotenv):
- RESUME_OUTPUT_DIR: sandbox root for generated resumes (default `generated-resumes`).
- RESUME_API_URL: rendering endpoint that turns resume JSON into a PDF.
- RESUME_API_TIMEOUT: request timeout in seconds.
- RESUME_LOG_LEVEL: logging level name for stderr logs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


DEFAULT_OUTPUT_DIR = "generated-resumes"
DEFAULT_API_URL = "https://latexresu.me/api/generate/resume"
DEFAULT_REQUEST_TIMEOUT = 60.0
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


@dataclass(frozen=True)
class Settings:
    """Settings shared by the workspace, the renderer and the server."""

    output_dir: Path
    api_url: str
    request_timeout: float
    log_level: str = DEFAULT_LOG_LEVEL
    user_agent: str = DEFAULT_USER_AGENT


def load_settings(
    *,
    output_dir: Optional[str] = None,
    api_url: Optional[str] = None,
    request_timeout: Optional[float] = None,
    log_level: Optional[str] = None,
) -> Settings:
    """Load settings from environment; explicit arguments take precedence."""
    return Settings(
        output_dir=Path(output_dir or os.getenv("RESUME_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR),
        api_url=api_url or os.getenv("RESUME_API_URL", DEFAULT_API_URL),
        request_timeout=float(
            request_timeout
            if request_timeout is not None
            else os.getenv("RESUME_API_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)
        ),
        log_level=(log_level or os.getenv("RESUME_LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper(),
    )
