"""
Static HTML export.

Writes a self-contained page that hands a pruned view to the
3d-force-graph browser library. Layout, camera and drawing all happen in
the browser; this module only serializes the bundle into the template.
"""

import json
import webbrowser
from pathlib import Path

from .session import RenderBundle

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>__TITLE__</title>
    <script src="https://unpkg.com/3d-force-graph"></script>
    <style>
        body { margin: 0; background: #000011; font-family: sans-serif; overflow: hidden; }
        .options { position: absolute; top: 5px; right: 20px; display: flex; flex-direction: column; align-items: flex-end; }
        .options button { margin: 5px 0; background: none; border: 1px solid #f50057; color: #f50057; padding: 6px 12px; cursor: pointer; }
        .info { position: absolute; bottom: 10%; left: 15px; color: #fff; display: none; flex-direction: column; }
        .info span { margin: 2px 0; }
    </style>
</head>
<body>
    <div id="graph"></div>
    <div class="options"><button id="reset-zoom">Reset zoom</button></div>
    <div class="info" id="info">
        <span id="info-name"></span>
        <span id="info-id"></span>
    </div>
    <script>
        const payload = __GRAPH_DATA__;
        const info = document.getElementById('info');

        const graph = ForceGraph3D({ rendererConfig: { powerPreference: 'high-performance' } })
            (document.getElementById('graph'))
            .graphData({ nodes: payload.nodes, links: payload.links })
            .width(window.innerWidth)
            .height(window.innerHeight)
            .nodeId(payload.nodeId)
            .linkSource(payload.linkSource)
            .linkTarget(payload.linkTarget)
            .nodeLabel('display_name')
            .nodeColor('color')
            .linkColor('color')
            .nodeResolution(payload.nodeResolution)
            .cooldownTicks(payload.cooldownTicks)
            .warmupTicks(payload.warmupTicks)
            .onNodeHover(node => {
                if (!node) { info.style.display = 'none'; return; }
                document.getElementById('info-name').textContent = node.display_name;
                document.getElementById('info-id').textContent = node[payload.nodeId];
                info.style.display = 'flex';
            })
            .onNodeDragEnd(node => { node.fx = node.x; node.fy = node.y; node.fz = node.z; });

        document.getElementById('reset-zoom').onclick = () => graph.zoomToFit();

        const onResize = () => graph.width(window.innerWidth).height(window.innerHeight);
        window.addEventListener('resize', onResize);
        window.addEventListener('unload', () => window.removeEventListener('resize', onResize));
    </script>
</body>
</html>
"""


def generate_html(bundle: RenderBundle, title: str = "lnview") -> str:
    """
    Generate the HTML content for a render bundle.
    """
    json_data = json.dumps(bundle.to_payload())
    # Keep "</script>" inside aliases from terminating the script block
    json_data = json_data.replace("</", "<\\/")
    return HTML_TEMPLATE.replace("__TITLE__", title).replace("__GRAPH_DATA__", json_data)


def write_html(bundle: RenderBundle, output_path: str = "graph.html",
               open_browser: bool = False) -> str:
    """
    Write the visualization to disk, optionally opening it in the browser.
    """
    out_file = Path(output_path)
    out_file.write_text(generate_html(bundle), encoding="utf-8")

    if open_browser:
        webbrowser.open(out_file.resolve().as_uri())

    return str(out_file)


class HtmlRenderer:
    """
    Renderer that writes each bundle it receives to an HTML file.

    Hover overlay and camera reset live in the browser page itself,
    so those hooks do nothing here.
    """

    def __init__(self, output_path: str = "graph.html", open_browser: bool = False):
        self.output_path = output_path
        self.open_browser = open_browser
        self.writes = 0

    def render(self, bundle: RenderBundle) -> None:
        write_html(bundle, self.output_path, open_browser=self.open_browser and self.writes == 0)
        self.writes += 1

    def show_info(self, info) -> None:
        """The page draws its own hover panel from the node records."""

    def zoom_to_fit(self) -> None:
        """The page's Reset zoom button calls zoomToFit in the browser."""
