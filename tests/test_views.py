from __future__ import annotations

from pathlib import Path

import pytest

from todo_app.core.config import Settings
from todo_app.core.errors import InternalError, NotFound
from todo_app.utils.assets import AssetStore
from todo_app.views.renderer import JinjaRenderer


@pytest.fixture()
def renderer(test_settings: Settings) -> JinjaRenderer:
    return JinjaRenderer(test_settings.TEMPLATES_DIR)


def test_render_index_lists_todos(renderer: JinjaRenderer) -> None:
    html = renderer.render(
        "index.html",
        {"todos": [{"id": "abc", "name": "Buy milk", "done": True}], "todosLen": 1},
    ).decode("utf-8")

    assert "Buy milk" in html
    assert 'data-todos-len="1"' in html
    assert 'data-done="true"' in html
    assert 'action="/not-done"' in html


def test_render_escapes_names(renderer: JinjaRenderer) -> None:
    html = renderer.render(
        "index.html",
        {"todos": [{"id": "abc", "name": "<script>x</script>", "done": False}], "todosLen": 1},
    ).decode("utf-8")

    assert "<script>x</script>" not in html
    assert "&lt;script&gt;" in html


def test_render_missing_view_is_internal_error(renderer: JinjaRenderer) -> None:
    with pytest.raises(InternalError):
        renderer.render("missing.html", {})


def test_render_broken_template_is_internal_error(tmp_path: Path) -> None:
    (tmp_path / "broken.html").write_text("{% for x in %}", encoding="utf-8")

    with pytest.raises(InternalError):
        JinjaRenderer(tmp_path).render("broken.html", {})


@pytest.mark.parametrize(
    "file_name, media_type",
    [
        ("todo.css", "text/css"),
        ("plus.svg", "image/svg+xml"),
        ("check.svg", "image/svg+xml"),
        ("circle.svg", "image/svg+xml"),
        ("trash.svg", "image/svg+xml"),
    ],
)
def test_asset_lookup(test_settings: Settings, file_name: str, media_type: str) -> None:
    asset = AssetStore(test_settings.STATIC_DIR).lookup(file_name)

    assert asset.media_type == media_type
    assert asset.content


@pytest.mark.parametrize("file_name", ["evil.js", "../main.py", "todo.CSS.bak", "index.html"])
def test_asset_lookup_outside_whitelist(test_settings: Settings, file_name: str) -> None:
    with pytest.raises(NotFound):
        AssetStore(test_settings.STATIC_DIR).lookup(file_name)


def test_asset_whitelisted_but_missing_on_disk(tmp_path: Path) -> None:
    with pytest.raises(NotFound):
        AssetStore(tmp_path).lookup("todo.css")
