"""Unit tests for the live preview synchronizer and section memo."""

from dataclasses import replace

import pytest

from folio.contexts.editing import set_layout
from folio.contexts.rendering import PreviewSynchronizer, SectionMemo, render_document


@pytest.mark.unit
def test_refresh_renders_and_notifies(custom_portfolio):
    preview = PreviewSynchronizer()
    received = []
    preview.subscribe(received.append)

    document = preview.refresh(custom_portfolio)

    assert document is preview.current
    assert received == [document]
    assert preview.render_count == 1
    assert preview.error is None


@pytest.mark.unit
def test_refresh_matches_render_document(custom_portfolio):
    preview = PreviewSynchronizer()
    preview.refresh(custom_portfolio)
    # Second refresh is served from the memo and must equal a fresh render
    assert preview.refresh(custom_portfolio) == render_document(custom_portfolio)


@pytest.mark.unit
def test_memo_reuses_unchanged_sections(custom_portfolio):
    preview = PreviewSynchronizer()
    preview.refresh(custom_portfolio)
    misses = preview.memo.misses

    custom_portfolio.custom_theme = set_layout(custom_portfolio.custom_theme, "projects", "minimal")
    document = preview.refresh(custom_portfolio)

    # Only the projects section was resolved again
    assert preview.memo.misses == misses + 1
    assert document.section("projects").variant.value == "minimal"


@pytest.mark.unit
def test_memo_notices_data_changes(custom_portfolio):
    preview = PreviewSynchronizer()
    preview.refresh(custom_portfolio)

    custom_portfolio.experience[0].role = "Chief Programmer"
    document = preview.refresh(custom_portfolio)

    assert document.section("experience").content.items[0].role == "Chief Programmer"


@pytest.mark.unit
def test_memo_size_follows_document(custom_portfolio):
    preview = PreviewSynchronizer()
    for variant in ("grid", "cards", "standard", "minimal"):
        custom_portfolio.custom_theme = set_layout(custom_portfolio.custom_theme, "projects", variant)
        preview.refresh(custom_portfolio)
    preview.refresh(custom_portfolio)

    assert len(preview.memo) == len(preview.section_order)


@pytest.mark.unit
def test_refresh_keeps_last_render_on_error(custom_portfolio):
    preview = PreviewSynchronizer()
    good = preview.refresh(custom_portfolio)

    fixed = replace(custom_portfolio, template_id="classic")
    assert preview.refresh(fixed) is None
    assert preview.error is not None
    assert preview.current is good
    assert preview.render_count == 1


@pytest.mark.unit
def test_unsubscribe(custom_portfolio):
    preview = PreviewSynchronizer()
    received = []
    preview.subscribe(received.append)
    preview.unsubscribe(received.append)
    preview.refresh(custom_portfolio)
    assert received == []


@pytest.mark.unit
def test_section_memo_hidden_sections_cached(custom_portfolio):
    memo = SectionMemo()
    theme = custom_portfolio.custom_theme
    config = replace(theme.section("education"), visible=False)

    memo.begin_pass()
    assert memo("education", config, custom_portfolio.education, None) is None
    assert memo("education", config, custom_portfolio.education, None) is None
    assert (memo.hits, memo.misses) == (1, 1)
