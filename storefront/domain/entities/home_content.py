from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HomeContent:
    id: str
    section_name: str  # "hero_title", "hero_subtitle", ...
    title: str = ""
    content: str = ""
    is_active: bool = True


@dataclass(frozen=True)
class HeroContent:
    title: str
    subtitle: str
