from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from src.domain.value_objects.dog_status import DogStatus
from src.interfaces.web.models import DogDetail
from src.interfaces.web.state import Failed, ListingState, Succeeded

SKELETON_CARDS = 6
NO_RESULTS_MESSAGE = "No dogs found matching your criteria."

STATUS_OPTIONS: list[tuple[str, str]] = [
    ("", "All Status"),
    (DogStatus.AVAILABLE.value, "Available"),
    (DogStatus.PENDING.value, "Pending"),
    (DogStatus.ADOPTED.value, "Adopted"),
]

_BADGES: dict[DogStatus, tuple[str, str]] = {
    DogStatus.AVAILABLE: ("badge-available", "Available"),
    DogStatus.PENDING: ("badge-pending", "Pending"),
    DogStatus.ADOPTED: ("badge-adopted", "Adopted"),
}


def status_badge(status: str) -> tuple[str, str] | None:
    """(css variant, label) for a known status; None means no badge."""
    known = DogStatus.parse(status)
    if known is None:
        return None
    return _BADGES[known]


def dog_detail_path(dog_id: int) -> str:
    return f"/dog/{dog_id}"


@dataclass(slots=True)
class ListingRenderer:
    env: Environment

    @classmethod
    def create_default(cls) -> ListingRenderer:
        base = Path(__file__).resolve().parent / "templates"
        env = Environment(
            loader=FileSystemLoader(str(base)),
            autoescape=select_autoescape(["html", "xml", "j2"]),
            enable_async=False,
        )
        env.globals["status_badge"] = status_badge
        env.globals["dog_detail_path"] = dog_detail_path
        return cls(env=env)

    def listing_context(self, state: ListingState) -> dict[str, Any]:
        outcome = state.outcome
        ctx: dict[str, Any] = {
            "filters": state.filters,
            "status_options": STATUS_OPTIONS,
            "breed_options": [("", "All Breeds")] + [(str(b.id), b.name) for b in state.breeds],
            "view": "loading",
            "skeleton_count": SKELETON_CARDS,
            "message": None,
            "dogs": (),
        }
        if isinstance(outcome, Failed):
            ctx.update(view="error", message=outcome.message)
        elif isinstance(outcome, Succeeded) and outcome.is_empty:
            ctx.update(view="empty", message=NO_RESULTS_MESSAGE)
        elif isinstance(outcome, Succeeded):
            ctx.update(view="cards", dogs=outcome.items)
        return ctx

    def render_listing(self, state: ListingState) -> str:
        return self.env.get_template("dog_list.html.j2").render(self.listing_context(state))

    def render_page(self, *, title: str, content: str) -> str:
        return self.env.get_template("_layout.html.j2").render(title=title, content=content)

    def render_dog_detail(self, dog: DogDetail) -> str:
        return self.env.get_template("dog_detail.html.j2").render(dog=dog)

    def render_not_found(self, message: str) -> str:
        return self.env.get_template("not_found.html.j2").render(message=message)
