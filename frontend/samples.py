"""Images the client falls back to (and shows in its gallery) when a request fails.

Kept separate from the gateway's demo images: the two sets are chosen from
independently and may diverge.
"""

FALLBACK_IMAGE_URLS: tuple[str, ...] = (
    "https://images.unsplash.com/photo-1679678691006-0ad24fecb769?q=80&w=2069&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1686002359940-6a51b0d64f68?q=80&w=2070&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1675426513141-f0020092d72e?q=80&w=1974&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1675426512283-9b7c28b8d0e5?q=80&w=1974&auto=format&fit=crop",
)
