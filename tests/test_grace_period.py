"""Test node drain grace period handling."""

import pytest

from clustermgr.core.grace_period import (
    DEFAULT_GRACE_PERIOD,
    GRACE_PERIOD_OPTIONS,
    parse_grace_period,
    render_grace_period,
    resolve_default,
    resolve_grace_period,
)
from clustermgr.core.interactive import NonInteractivePrompter
from clustermgr.errors import InvalidGracePeriodError
from clustermgr.model.cluster import ClusterRecord, GracePeriodValue


def cluster_with_grace(minutes=None):
    period = GracePeriodValue(value=minutes, unit="minutes") if minutes is not None else None
    return ClusterRecord(id="abc", state="ready", node_drain_grace_period=period)


class TestParseGracePeriod:
    @pytest.mark.parametrize(
        "text,minutes",
        [
            ("2 hours", 120),
            ("45 minutes", 45),
            ("1 hour", 60),
            ("15 minutes", 15),
            ("1.5 hours", 90),
            ("1 minute", 1),
        ],
    )
    def test_normalizes_to_minutes(self, text, minutes):
        assert parse_grace_period(text).to_minutes() == minutes

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "one hour",
            "60",
            "1 day",
            "-1 hour",
            "1 hour extra",
            "nan minutes",
            "inf hours",
            "-inf minutes",
        ],
    )
    def test_malformed_values(self, text):
        with pytest.raises(InvalidGracePeriodError):
            parse_grace_period(text)

    @pytest.mark.parametrize("text", ["nan minutes", "inf hours"])
    def test_non_finite_values(self, text):
        """Test NaN and infinity are rejected."""
        with pytest.raises(InvalidGracePeriodError, match="is not a number"):
            parse_grace_period(text)


class TestRenderGracePeriod:
    def test_minutes_below_an_hour(self):
        assert render_grace_period(GracePeriodValue(value=45, unit="minutes")) == "45 minutes"

    def test_single_hour(self):
        assert render_grace_period(GracePeriodValue(value=60, unit="minutes")) == "1 hour"

    def test_multiple_hours(self):
        assert render_grace_period(GracePeriodValue(value=240, unit="minutes")) == "4 hours"


class TestResolveDefault:
    def test_cluster_without_setting_uses_global_default(self):
        assert resolve_default(cluster_with_grace(), None) == DEFAULT_GRACE_PERIOD

    def test_cluster_without_setting_uses_requested(self):
        assert resolve_default(cluster_with_grace(), "30 minutes") == "30 minutes"

    def test_cluster_setting_wins_when_not_requested(self):
        assert resolve_default(cluster_with_grace(120), None) == "2 hours"

    def test_requested_overrides_cluster_setting(self):
        assert resolve_default(cluster_with_grace(120), "15 minutes") == "15 minutes"


class TestResolveGracePeriod:
    def test_non_interactive(self):
        period = resolve_grace_period(cluster_with_grace(30), None, NonInteractivePrompter())
        assert period.to_minutes() == 30

    def test_interactive_offers_fixed_options(self, prompter_factory):
        prompter = prompter_factory({"Node draining": "8 hours"})
        period = resolve_grace_period(cluster_with_grace(), None, prompter)

        assert period.to_minutes() == 480
        assert prompter.questions[0]["options"] == GRACE_PERIOD_OPTIONS
        assert prompter.questions[0]["default"] == "1 hour"
