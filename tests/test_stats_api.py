"""Tests for the gswarm stats API client."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from gswarmcheck.config import CLIENT_TAG, STATS_API_URL
from gswarmcheck.models import RankEntry, StatsSummary
from gswarmcheck.stats_api import (
    StatsAPIError,
    _get_session,
    fetch_stats,
    parse_rank,
    parse_response,
)


def _mock_response(status=200, payload=None, text=""):
    """Create a mock requests.Response with the given status and JSON body."""
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status
    resp.ok = 200 <= status < 300
    resp.text = text
    resp.json.return_value = payload
    return resp


class TestParseResponse:
    def test_full_payload(self):
        data = {
            "ranks": [
                {
                    "peerId": "p1",
                    "eoa": "0xabc",
                    "rank": 3,
                    "totalWins": 12,
                    "totalRewards": 450,
                    "lastSeen": "2026-10-19T08:30:00Z",
                },
            ],
            "stats": {"totalNodes": 1000, "rankedNodes": 800},
        }

        ranks, stats = parse_response(data)

        assert ranks == [
            RankEntry(
                peer_id="p1",
                eoa="0xabc",
                rank=3,
                total_wins=12,
                total_rewards=450,
                last_seen="2026-10-19T08:30:00Z",
            )
        ]
        assert stats == StatsSummary(total_nodes=1000, ranked_nodes=800)

    def test_empty_ranks_and_stats(self):
        ranks, stats = parse_response({"ranks": [], "stats": {}})

        assert ranks == []
        assert stats.total_nodes is None
        assert stats.ranked_nodes is None

    def test_missing_keys(self):
        ranks, stats = parse_response({})

        assert ranks == []
        assert stats == StatsSummary()

    def test_null_values(self):
        ranks, stats = parse_response({"ranks": None, "stats": None})

        assert ranks == []
        assert stats == StatsSummary()

    def test_non_object_rank_items_skipped(self):
        ranks, _ = parse_response({"ranks": ["junk", {"peerId": "p1"}, 7]})

        assert [r.peer_id for r in ranks] == ["p1"]

    def test_non_list_ranks_treated_as_empty(self):
        ranks, stats = parse_response({"ranks": 5, "stats": {}})

        assert ranks == []
        assert stats == StatsSummary()

    def test_partial_rank_entry(self):
        entry = parse_rank({"peerId": "p1", "rank": 5})

        assert entry.rank == 5
        assert entry.eoa is None
        assert entry.total_wins is None
        assert entry.last_seen is None


class TestFetchStats:
    @patch("gswarmcheck.stats_api._get_session")
    def test_posts_peer_ids(self, mock_session):
        session = mock_session.return_value
        session.post.return_value = _mock_response(payload={"ranks": [], "stats": {}})

        fetch_stats(["peer-123"])

        session.post.assert_called_once_with(
            STATS_API_URL, json={"peerIds": ["peer-123"]}
        )

    @patch("gswarmcheck.stats_api._get_session")
    def test_returns_shaped_data(self, mock_session):
        mock_session.return_value.post.return_value = _mock_response(
            payload={
                "ranks": [{"peerId": "p1", "rank": 1}],
                "stats": {"totalNodes": 10, "rankedNodes": 4},
            }
        )

        ranks, stats = fetch_stats(["p1"])

        assert ranks[0].peer_id == "p1"
        assert stats.total_nodes == 10

    @patch("gswarmcheck.stats_api._get_session")
    def test_error_status_raises_with_body(self, mock_session):
        mock_session.return_value.post.return_value = _mock_response(
            status=500, text="server error"
        )

        with pytest.raises(StatsAPIError) as excinfo:
            fetch_stats(["p1"])

        assert excinfo.value.status == 500
        assert excinfo.value.body == "server error"
        assert str(excinfo.value) == "gswarm API error: 500 server error"

    @patch("gswarmcheck.stats_api._get_session")
    def test_redirect_status_raises(self, mock_session):
        resp = _mock_response(status=304, payload={"ranks": [], "stats": {}})
        resp.ok = True  # requests treats anything below 400 as ok
        mock_session.return_value.post.return_value = resp

        with pytest.raises(StatsAPIError) as excinfo:
            fetch_stats(["p1"])

        assert excinfo.value.status == 304

    @patch("gswarmcheck.stats_api._get_session")
    def test_invalid_json_raises(self, mock_session):
        resp = _mock_response(text="<html>oops</html>")
        resp.json.side_effect = ValueError("Expecting value")
        mock_session.return_value.post.return_value = resp

        with pytest.raises(StatsAPIError) as excinfo:
            fetch_stats(["p1"])

        assert excinfo.value.status == 200
        assert excinfo.value.body == "<html>oops</html>"

    @patch("gswarmcheck.stats_api._get_session")
    def test_non_object_body_raises(self, mock_session):
        mock_session.return_value.post.return_value = _mock_response(
            payload=["not", "an", "object"], text='["not","an","object"]'
        )

        with pytest.raises(StatsAPIError):
            fetch_stats(["p1"])

    @patch("gswarmcheck.stats_api._get_session")
    def test_transport_errors_propagate(self, mock_session):
        mock_session.return_value.post.side_effect = requests.ConnectionError(
            "Name or service not known"
        )

        with pytest.raises(requests.ConnectionError):
            fetch_stats(["p1"])


class TestSession:
    @pytest.fixture(autouse=True)
    def reset_session(self, monkeypatch):
        monkeypatch.setattr("gswarmcheck.stats_api._SESSION", None)

    def test_client_tag_header(self):
        session = _get_session()

        assert session.headers["X-Requested-By"] == CLIENT_TAG

    def test_session_is_reused(self):
        assert _get_session() is _get_session()
