"""Pydantic configuration model for restcall clients."""

from typing import Optional

from pydantic import BaseModel, Field


class ClientConfig(BaseModel):
    """Configuration for connections and dispatch behavior."""

    timeout: float = Field(30.0, gt=0, description="Total per-request timeout in seconds")
    connect_timeout: float = Field(10.0, gt=0, description="Connection timeout in seconds")
    encode_query: bool = Field(
        True,
        description="Percent-encode query arguments (False keeps raw key=value concatenation)",
    )
    user_agent: Optional[str] = Field(None, description="Custom User-Agent header")
    max_content_size: int = Field(
        50 * 1024 * 1024,
        ge=1,
        description="Maximum response size in bytes",
    )
    max_workers: int = Field(
        4,
        ge=1,
        description="Worker threads for requests dispatched without a running event loop",
    )
    allow_redirects: bool = Field(True, description="Follow HTTP redirects")

    model_config = {"extra": "forbid"}
