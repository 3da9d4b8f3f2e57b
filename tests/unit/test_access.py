# tests/unit/test_access.py
"""Unit tests for feature gating."""

import pytest

from craftmargin.access import Feature, is_feature_available, require_feature
from craftmargin.errors import FeatureNotAvailableError, InputError


class TestFeatureAccess:
    @pytest.mark.parametrize("feature", [Feature.BASIC_CALCULATOR, Feature.DASHBOARD_OVERVIEW])
    def test_free_features_always_available(self, feature):
        assert is_feature_available(feature, entitled=False) is True

    @pytest.mark.parametrize(
        "feature",
        ["ai_insights", "marketplace_analysis", "price_monitoring", "data_export"],
    )
    def test_premium_features_need_entitlement(self, feature):
        assert is_feature_available(feature, entitled=False) is False
        assert is_feature_available(feature, entitled=True) is True

    def test_unknown_feature(self):
        with pytest.raises(InputError):
            is_feature_available("teleport", entitled=True)

    def test_require_feature_raises(self):
        with pytest.raises(FeatureNotAvailableError) as exc:
            require_feature("ai_insights", entitled=False)
        assert exc.value.code == "feature_not_available"
        assert exc.value.feature == "ai_insights"

    def test_require_feature_passes_when_entitled(self):
        require_feature(Feature.PRICE_MONITORING, entitled=True)
