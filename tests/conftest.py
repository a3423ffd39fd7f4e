"""Shared fixtures for the lnview test suite."""

import pytest


def build_raw(node_ids, channels):
    """Build a raw graph document from ids and (channel_id, a, b) triples."""
    return {
        "nodes": [{"pub_key": node_id} for node_id in node_ids],
        "links": [
            {"channel_id": cid, "capacity": 100, "node1_pub": a, "node2_pub": b}
            for cid, a, b in channels
        ],
    }


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep a developer's config file and environment out of the tests."""
    monkeypatch.setenv("LNVIEW_CONFIG", str(tmp_path / "no-config.yaml"))
    monkeypatch.delenv("LNVIEW_DEFAULT_THRESHOLD", raising=False)


@pytest.fixture
def abc_raw():
    """A - B - C chain, mixing the three endpoint shapes and field spellings."""
    return {
        "nodes": [
            {"pub_key": "A", "alias": "Alice", "color": "#3399ff"},
            {"publicKey": "B", "alias": ""},
            {"id": "C", "color": "#000000"},
        ],
        "links": [
            {"channel_id": "ab", "capacity": "100", "node1_pub": "A", "node2_pub": "B"},
            {
                "id": "bc",
                "capacity": 100,
                "policies": [{"public_key": "B"}, {"public_key": "C"}],
            },
        ],
    }


@pytest.fixture
def hub_raw():
    """
    Hub H with spokes S1..S4, a chord S1 - S2 and an isolated node I.

    Degrees: H=4, S1=2, S2=2, S3=1, S4=1, I=0.
    """
    return build_raw(
        ["H", "S1", "S2", "S3", "S4", "I"],
        [
            ("h1", "H", "S1"),
            ("h2", "H", "S2"),
            ("h3", "H", "S3"),
            ("h4", "H", "S4"),
            ("s12", "S1", "S2"),
        ],
    )


@pytest.fixture
def make_raw():
    return build_raw
