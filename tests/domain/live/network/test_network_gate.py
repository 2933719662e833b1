"""Tests for the viewer network-quality gate."""

import pytest

from app.domain.live.network.network_gate import (
    NetworkTier,
    classify_network,
    get_connection_recommendation,
    read_connection_hints,
)


class TestClassifyNetwork:
    @pytest.mark.parametrize("net_type", ["slow-2g", "2g", "3g"])
    def test_slow_types_blocked_regardless_of_downlink(self, net_type: str):
        verdict = classify_network(net_type, 50)

        assert verdict.is_allowed is False
        assert verdict.tier == NetworkTier.BLOCKING
        assert net_type.upper() in verdict.message

    def test_3g_message(self):
        verdict = classify_network("3g", 50)
        assert verdict.message == (
            "Your connection (3G) is too slow for live streaming. Please use 4G, 5G, or Wi-Fi."
        )
        assert verdict.speed_mbps == 50

    def test_4g_low_downlink_allowed_with_warning(self):
        verdict = classify_network("4g", 3)

        assert verdict.is_allowed is True
        assert verdict.tier == NetworkTier.WARNING
        assert "buffering" in verdict.message

    def test_4g_at_threshold_is_informational(self):
        verdict = classify_network("4g", 5)
        assert verdict.tier == NetworkTier.INFORMATIONAL
        assert verdict.message == "Your connection is suitable for streaming."

    def test_4g_without_downlink_is_informational(self):
        assert classify_network("4g").tier == NetworkTier.INFORMATIONAL

    def test_unknown_type_fails_open(self):
        verdict = classify_network(None)

        assert verdict.type == "unknown"
        assert verdict.is_allowed is True
        assert verdict.message == "Network detection not supported. Proceeding..."

    def test_type_is_normalized(self):
        assert classify_network("  3G ").is_allowed is False

    def test_wifi_like_types_allowed(self):
        verdict = classify_network("5g", 100)
        assert verdict.is_allowed is True
        assert verdict.tier == NetworkTier.INFORMATIONAL


class TestRecommendation:
    def test_recommendations_per_type(self):
        assert "2G is not supported" in get_connection_recommendation("2g")
        assert "3G is too slow" in get_connection_recommendation("3g")
        assert "4G connection detected" in get_connection_recommendation("4g")
        assert "use 4G, 5G, or Wi-Fi" in get_connection_recommendation(None)
        assert get_connection_recommendation("5g") == "Good connection detected."


class TestReadConnectionHints:
    def test_reads_client_hint_headers(self):
        assert read_connection_hints({"ECT": "3g", "Downlink": "1.5"}) == ("3g", 1.5)

    def test_explicit_values_win(self):
        ect, downlink = read_connection_hints({"ect": "3g", "downlink": "1.5"}, "4g", 20)
        assert (ect, downlink) == ("4g", 20.0)

    def test_invalid_downlink_treated_as_absent(self):
        assert read_connection_hints({"downlink": "fast"}) == (None, None)
        assert read_connection_hints({"downlink": "-1"}) == (None, None)

    def test_no_hints(self):
        assert read_connection_hints({}) == (None, None)
