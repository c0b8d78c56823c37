"""
Shared route dependencies.
"""

import asyncio

from app.core.settings import settings


async def simulate_latency():
    """Delay the request by SIMULATED_LATENCY_MS (no-op when 0)."""
    if settings.SIMULATED_LATENCY_MS > 0:
        await asyncio.sleep(settings.SIMULATED_LATENCY_MS / 1000)
