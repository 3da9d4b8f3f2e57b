# craftmargin/access.py
"""Feature gating on the billing collaborator's ``entitled`` flag."""

from enum import Enum

from craftmargin.errors import FeatureNotAvailableError, InputError


class Feature(str, Enum):
    BASIC_CALCULATOR = "basic_calculator"
    DASHBOARD_OVERVIEW = "dashboard_overview"
    AI_INSIGHTS = "ai_insights"
    MARKETPLACE_ANALYSIS = "marketplace_analysis"
    PRICE_MONITORING = "price_monitoring"
    DATA_EXPORT = "data_export"


FREE_FEATURES = frozenset({Feature.BASIC_CALCULATOR, Feature.DASHBOARD_OVERVIEW})


def is_feature_available(feature: Feature | str, entitled: bool) -> bool:
    """
    Whether a feature can be used.

    Free features are always available; everything else needs an active
    subscription.
    """
    try:
        feature = Feature(feature)
    except ValueError:
        raise InputError(f"Unknown feature '{feature}'")
    return feature in FREE_FEATURES or bool(entitled)


def require_feature(feature: Feature | str, entitled: bool) -> None:
    """Raise FeatureNotAvailableError unless the feature is available."""
    if not is_feature_available(feature, entitled):
        raise FeatureNotAvailableError(Feature(feature).value)
