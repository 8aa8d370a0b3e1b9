"""Process-wide outbound HTTP client factory."""

import httpx

from weatherdesk.config.schema import UpstreamConfig


def build_http_client(upstream: UpstreamConfig) -> httpx.Client:
    """Create the pooled client shared by every upstream lookup."""
    return httpx.Client(
        timeout=upstream.timeout_seconds,
        headers={"User-Agent": upstream.user_agent, "Accept": "application/json"},
        follow_redirects=True,
    )
