"""Fixed image set served while the gateway runs in demo mode."""

from __future__ import annotations

import random
from typing import Optional, Sequence

DEMO_IMAGE_URLS: tuple[str, ...] = (
    "https://images.unsplash.com/photo-1679678691006-0ad24fecb769?q=80&w=2069&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1686002359940-6a51b0d64f68?q=80&w=2070&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1675426513141-f0020092d72e?q=80&w=1974&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1675426512283-9b7c28b8d0e5?q=80&w=1974&auto=format&fit=crop",
)

DEMO_MODE_MESSAGE = "Demo mode: Using sample image (API key not configured)"


def pick_demo_image(
    urls: Sequence[str] = DEMO_IMAGE_URLS,
    rng: Optional[random.Random] = None,
) -> str:
    if not urls:
        raise ValueError("demo image set is empty")
    return (rng or random).choice(urls)
