"""
Unit tests for the HTML exporter.

Ensures that:
1. The page wires the pruned view into 3d-force-graph with the right accessors.
2. Renderer tuning is embedded.
3. Hostile aliases cannot break out of the script block.
"""

import json
from unittest.mock import patch

import pytest
from lnview.engine.interaction import InteractionController
from lnview.render.html import HtmlRenderer, generate_html, write_html
from lnview.render.session import ResizeEvents, VisualizationSession


def _payload(html):
    start = html.index("const payload = ") + len("const payload = ")
    end = html.index(";\n", start)
    return json.loads(html[start:end])


class TestGenerateHtml:
    @pytest.fixture
    def bundle(self, abc_raw):
        abc_raw["nodes"][0]["alias"] = "</script><b>x</b>"
        controller = InteractionController()
        controller.load(abc_raw)
        controller.click("B")
        renderer = HtmlRenderer()
        with patch("lnview.render.html.write_html"):
            with VisualizationSession(controller, renderer, ResizeEvents()) as session:
                return session.last_bundle

    def test_structure(self, bundle):
        html = generate_html(bundle)
        assert "<!DOCTYPE html>" in html
        assert "ForceGraph3D" in html
        assert "Reset zoom" in html
        assert "zoomToFit" in html

    def test_embedded_data(self, bundle):
        payload = _payload(generate_html(bundle))
        assert [n["id"] for n in payload["nodes"]] == ["A", "B", "C"]
        assert [l["id"] for l in payload["links"]] == ["ab", "bc"]
        assert payload["nodeId"] == "id"
        assert payload["linkSource"] == "endpoint_a"
        assert payload["linkTarget"] == "endpoint_b"
        assert payload["cooldownTicks"] == 20
        assert payload["nodeResolution"] == 8
        assert payload["warmupTicks"] == 20

    def test_script_injection_escaped(self, bundle):
        html = generate_html(bundle)
        assert "</script><b>" not in html
        assert _payload(html)["nodes"][0]["display_name"] == "</script><b>x</b>"

    def test_title(self, bundle):
        assert "<title>My graph</title>" in generate_html(bundle, title="My graph")


class TestWriteHtml:
    def test_writes_file(self, abc_raw, tmp_path):
        out = tmp_path / "graph.html"
        controller = InteractionController()
        controller.load(abc_raw)
        with VisualizationSession(controller, HtmlRenderer(str(out)), ResizeEvents()) as session:
            bundle = session.last_bundle

        assert out.exists()
        assert "ForceGraph3D" in out.read_text(encoding="utf-8")

        with patch("lnview.render.html.webbrowser.open") as mock_open:
            write_html(bundle, str(out), open_browser=True)
        mock_open.assert_called_once_with(out.resolve().as_uri())

    def test_renderer_opens_browser_once(self, abc_raw, tmp_path):
        out = tmp_path / "graph.html"
        controller = InteractionController()
        controller.load(abc_raw)
        renderer = HtmlRenderer(str(out), open_browser=True)

        with patch("lnview.render.html.webbrowser.open") as mock_open:
            with VisualizationSession(controller, renderer, ResizeEvents()) as session:
                session.on_node_click("B")

        assert renderer.writes == 2
        assert mock_open.call_count == 1

    def test_overlay_and_zoom_hooks_do_not_write(self, abc_raw, tmp_path):
        out = tmp_path / "graph.html"
        controller = InteractionController()
        controller.load(abc_raw)
        renderer = HtmlRenderer(str(out))

        with VisualizationSession(controller, renderer, ResizeEvents()) as session:
            session.on_node_hover("B")
            session.reset_camera()

        assert renderer.writes == 1
