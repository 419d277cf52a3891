from __future__ import annotations

import asyncio
import threading

import pytest

from newsdesk_webapp.app.notifications import NoticeKind
from newsdesk_webapp.app.public_state import PublicController
from newsdesk_webapp.app.samples import default_filter_options, sample_public_articles

from fakes import FakeClient, make_article


pytestmark = pytest.mark.anyio


def _controller(articles, notifier, **kw) -> tuple[PublicController, FakeClient]:
    client = FakeClient(articles)
    controller = PublicController(client, notifier, debounce_seconds=5.0, **kw)
    return controller, client


async def test_load_applies_filters_and_reports_changes(notifier):
    seen = []
    client = FakeClient([make_article(i) for i in range(1, 4)])
    controller = PublicController(client, notifier, on_change=seen.append)
    await controller.load()
    assert [a.id for a in controller.state.filtered] == [1, 2, 3]
    assert controller.state.options.regions == ["National", "Telangana"]
    assert seen and seen[-1] is controller.state
    assert notifier.history == []


async def test_pagination_ten_items_page_size_six(notifier):
    controller, _ = _controller([make_article(i) for i in range(1, 11)], notifier)
    await controller.load()
    s = controller.state
    assert len(s.visible) == 6 and s.has_more is True
    controller.load_more()
    assert len(s.visible) == 10 and s.has_more is False
    controller.load_more()
    assert s.displayed_count == 12


async def test_filter_change_resets_displayed_count(notifier):
    controller, _ = _controller([make_article(i) for i in range(1, 11)], notifier)
    await controller.load()
    controller.load_more()
    controller.set_region("National")
    assert controller.state.displayed_count == 6


async def test_filters_compose(notifier):
    articles = [
        make_article(1, "Metro line opens", region="Telangana", language="Hindi"),
        make_article(2, "Metro fares", region="National", language="Hindi"),
        make_article(3, "Metro expansion", region="Telangana", language="English"),
        make_article(4, "Budget", region="Telangana", language="Hindi"),
    ]
    controller, _ = _controller(articles, notifier)
    await controller.load()
    controller.set_region("Telangana")
    controller.set_language("Hindi")
    controller.set_search("metro")
    controller.flush_search()
    assert [a.id for a in controller.state.filtered] == [1]

    controller.set_region(None)
    assert [a.id for a in controller.state.filtered] == [1, 2]


async def test_search_matches_content_but_not_region(notifier):
    articles = [
        make_article(1, "Weather", content="Heavy rain expected in Kerala"),
        make_article(2, "Sports", region="Kerala"),
    ]
    controller, _ = _controller(articles, notifier)
    await controller.load()
    controller.set_search("KERALA")
    controller.flush_search()
    assert [a.id for a in controller.state.filtered] == [1]


async def test_search_is_debounced(notifier):
    controller, _ = _controller([make_article(1, "Alpha"), make_article(2, "Beta")], notifier)
    await controller.load()
    controller.set_search("alp")
    assert controller.state.search == ""
    assert len(controller.state.filtered) == 2
    controller.flush_search()
    assert controller.state.search == "alp"
    assert [a.id for a in controller.state.filtered] == [1]


async def test_clear_search_drops_pending_term(notifier):
    controller, _ = _controller([make_article(1, "Alpha"), make_article(2, "Beta")], notifier)
    await controller.load()
    controller.set_search("alpha")
    controller.clear_search()
    controller.flush_search()
    assert controller.state.search == ""
    assert len(controller.state.filtered) == 2


async def test_no_results(notifier):
    controller, _ = _controller([make_article(1)], notifier)
    await controller.load()
    controller.set_language("Tamil")
    assert controller.state.no_results is True
    assert controller.state.has_more is False


async def test_carousel_uses_featured_of_all_articles(notifier):
    articles = [make_article(i, featured=i <= 3, region="National" if i != 2 else "Kerala") for i in range(1, 6)]
    controller, _ = _controller(articles, notifier)
    await controller.load()
    controller.set_region("Kerala")
    assert [a.id for a in controller.state.featured] == [1, 2, 3]


async def test_carousel_clamps(notifier):
    controller, _ = _controller([make_article(i, featured=True) for i in range(1, 4)], notifier)
    await controller.load()
    s = controller.state
    controller.previous_slide()
    assert s.carousel_position == 0
    for _ in range(5):
        controller.next_slide()
    assert s.carousel_position == 2
    assert s.can_go_next is False and s.can_go_previous is True


async def test_carousel_without_featured_stays_at_zero(notifier):
    controller, _ = _controller([make_article(1)], notifier)
    await controller.load()
    controller.next_slide()
    controller.previous_slide()
    assert controller.state.carousel_position == 0


@pytest.mark.parametrize(
    "start,end,expected",
    [
        (200, 100, 1),
        (200, 150, 0),
        (200, 149, 1),
        (100, 200, 0),
    ],
)
async def test_swipe_threshold(notifier, start, end, expected):
    controller, _ = _controller([make_article(i, featured=True) for i in range(1, 4)], notifier)
    await controller.load()
    controller.swipe(start, end)
    assert controller.state.carousel_position == expected


async def test_rightward_swipe_goes_back(notifier):
    controller, _ = _controller([make_article(i, featured=True) for i in range(1, 4)], notifier)
    await controller.load()
    controller.next_slide()
    controller.swipe(100, 200)
    assert controller.state.carousel_position == 0


async def test_load_failure_falls_back_to_samples(notifier):
    controller, client = _controller([], notifier)
    client.fail = True
    await controller.load()
    s = controller.state
    assert s.using_samples is True
    assert [a.title for a in s.articles] == [a.title for a in sample_public_articles()]
    assert len(s.featured) == 3
    assert s.options == default_filter_options()
    assert notifier.last.kind is NoticeKind.WARNING
    assert "sample articles" in notifier.last.message


async def test_filter_options_fall_back_independently(notifier):
    controller, client = _controller([make_article(1)], notifier)
    client.fail_filters = True
    await controller.load()
    assert controller.state.using_samples is False
    assert controller.state.options == default_filter_options()


async def test_refresh_reloads_and_announces(notifier):
    controller, client = _controller([make_article(1)], notifier)
    await controller.load()
    client.articles.append(make_article(2))
    await controller.refresh()
    assert [a.id for a in controller.state.filtered] == [1, 2]
    assert notifier.last.kind is NoticeKind.SUCCESS
    assert notifier.last.message == "News updated successfully!"


async def test_silent_refresh(notifier):
    controller, _ = _controller([make_article(1)], notifier)
    await controller.load()
    await controller.refresh(announce=False)
    assert notifier.history == []


async def test_debounced_search_applies_on_loop_thread(notifier):
    threads = []
    client = FakeClient([make_article(1, "Alpha"), make_article(2, "Beta")])
    controller = PublicController(
        client, notifier, debounce_seconds=0.01, on_change=lambda s: threads.append(threading.current_thread())
    )
    await controller.load()
    controller.set_search("alp")
    await asyncio.sleep(0.1)
    assert controller.state.search == "alp"
    assert [a.id for a in controller.state.filtered] == [1]
    assert threads and set(threads) == {threading.current_thread()}


async def test_newer_keystroke_replaces_pending_search(notifier):
    client = FakeClient([make_article(1, "Alpha"), make_article(2, "Beta")])
    controller = PublicController(client, notifier, debounce_seconds=0.01)
    await controller.load()
    controller.set_search("alp")
    controller.set_search("bet")
    await asyncio.sleep(0.1)
    assert controller.state.search == "bet"
    assert [a.id for a in controller.state.filtered] == [2]


async def test_open_article_shows_full_text(notifier):
    long_body = "word " * 400
    controller, _ = _controller([make_article(1), make_article(2, content=long_body)], notifier)
    await controller.load()
    controller.open_article(2)
    assert controller.state.selected.id == 2
    assert controller.state.selected.content == long_body
    controller.close_article()
    assert controller.state.selected is None


async def test_open_unknown_article_keeps_selection_empty(notifier):
    seen = []
    controller, _ = _controller([make_article(1)], notifier)
    await controller.load()
    controller.on_change = seen.append
    controller.open_article(42)
    controller.close_article()
    assert controller.state.selected is None
    assert seen == []


async def test_featured_article_opens_from_carousel_position(notifier):
    controller, _ = _controller([make_article(i, featured=True) for i in range(1, 4)], notifier)
    await controller.load()
    controller.next_slide()
    controller.open_article(controller.state.featured[controller.state.carousel_position].id)
    assert controller.state.selected.id == 2
