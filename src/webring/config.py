from typing import Dict, Optional

from pydantic import BaseModel, Field

from webring import __version__

USER_AGENT = f"webring-python/{__version__}"


class FetchConfig(BaseModel):
    """Configuration for fetching webring and status documents."""

    # No deadline by default; callers bound a fetch with asyncio.wait_for,
    # which cancels it. When this timeout expires instead, the fetch fails
    # with FetchTimeoutError.
    timeout: Optional[float] = Field(None, description="Per-request timeout in seconds, None for no timeout")
    follow_redirects: bool = Field(True, description="Follow HTTP redirects before checking the status code")
    headers: Dict[str, str] = Field(
        default_factory=lambda: {"User-Agent": USER_AGENT},
        description="Headers sent with every request",
    )
