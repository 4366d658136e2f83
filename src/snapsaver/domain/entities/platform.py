from __future__ import annotations

from enum import Enum


class Platform(str, Enum):
    """Social media platforms whose post URLs are recognised."""

    FACEBOOK = "Facebook"
    INSTAGRAM = "Instagram"
    TIKTOK = "TikTok"
    YOUTUBE = "YouTube"
    TWITTER = "Twitter"
