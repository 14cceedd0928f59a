from __future__ import annotations

import re

import pytest

from src.interfaces.web.models import BreedOption, DogSummary
from src.interfaces.web.renderer import ListingRenderer, status_badge
from src.interfaces.web.state import LOADING, Failed, FilterState, ListingState, Succeeded


@pytest.fixture(scope="module")
def renderer() -> ListingRenderer:
    return ListingRenderer.create_default()


def make_state(outcome, **filters) -> ListingState:
    return ListingState(
        filters=FilterState(**filters),
        outcome=outcome,
        breeds=[BreedOption(id=7, name="Beagle"), BreedOption(id=8, name="Boxer")],
    )


def test_loading_renders_six_skeletons(renderer):
    html = renderer.render_listing(make_state(LOADING))
    assert html.count('data-testid="skeleton-card"') == 6
    assert 'class="card"' not in html


def test_error_renders_message_panel(renderer):
    html = renderer.render_listing(make_state(Failed("Failed to fetch dogs: 500 <boom>")))
    assert 'role="alert"' in html
    assert "Failed to fetch dogs: 500 &lt;boom&gt;" in html
    assert "skeleton-card" not in html


def test_empty_renders_no_results_panel(renderer):
    html = renderer.render_listing(make_state(Succeeded(())))
    assert "No dogs found matching your criteria." in html
    assert "data-key" not in html


def test_cards_render_in_order_with_badges(renderer):
    dogs = (
        DogSummary(id=3, name="Rocky", breed="Boxer", status="ADOPTED"),
        DogSummary(id=1, name="Buddy", breed="Beagle", status="AVAILABLE"),
        DogSummary(id=5, name="Mystery", breed="Mixed", status="FOSTERED"),
    )
    html = renderer.render_listing(make_state(Succeeded(dogs)))
    assert re.findall(r'data-key="(\d+)"', html) == ["3", "1", "5"]
    assert "badge-adopted" in html
    assert "badge-available" in html
    assert html.count('class="badge ') == 2
    assert 'href="/dog/5"' in html
    assert "Mixed" in html


@pytest.mark.parametrize(
    "outcome",
    [
        LOADING,
        Failed("x"),
        Succeeded(()),
        Succeeded((DogSummary(id=1, name="Buddy", breed="Boxer", status="AVAILABLE"),)),
    ],
)
def test_filters_render_in_every_state(renderer, outcome):
    html = renderer.render_listing(make_state(outcome, breed_id="8", status=""))
    assert '<option value="">All Breeds</option>' in html
    assert '<option value="8" selected>Boxer</option>' in html
    assert '<option value="" selected>All Status</option>' in html
    assert '<option value="PENDING">Pending</option>' in html


def test_status_badge_exact_match_only():
    assert status_badge("AVAILABLE") == ("badge-available", "Available")
    assert status_badge("PENDING") == ("badge-pending", "Pending")
    assert status_badge("ADOPTED") == ("badge-adopted", "Adopted")
    assert status_badge("available") is None
    assert status_badge("") is None
