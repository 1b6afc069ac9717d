"""Static site endpoints: About page and navigation."""
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from h2ok.config.settings import Settings
from h2ok.core.dependencies import get_app_settings
from h2ok.schemas.base import Envelope

router = APIRouter(tags=["site"])

ABOUT_TEXT = (
    "H2Ok helps you find free water refill points nearby. The MVP focuses on "
    "speed and clarity: an interactive map, a simple search, and useful updates."
)


class NavLink(BaseModel):
    label: str
    href: str
    external: bool = False


class AboutPage(BaseModel):
    title: str
    body: str
    community_url: str
    navigation: list[NavLink]


def navigation_links(community_url: str) -> list[NavLink]:
    return [
        NavLink(label="Map", href="/map"),
        NavLink(label="Updates", href="/updates"),
        NavLink(label="About", href="/about"),
        NavLink(label="Telegram", href=community_url, external=True),
    ]


@router.get("/about", response_model=Envelope[AboutPage])
async def about(settings: Settings = Depends(get_app_settings)):
    page = AboutPage(
        title="About the project",
        body=ABOUT_TEXT,
        community_url=settings.community_url,
        navigation=navigation_links(settings.community_url),
    )
    return Envelope[AboutPage](status="ok", data=page)
