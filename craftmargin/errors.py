# craftmargin/errors.py
"""
Error taxonomy for craftmargin.

Every error carries a stable ``code`` so the tools layer can report it in a
discriminated result without leaking exception types to callers.
"""


class CraftMarginError(Exception):
    """Base class for all craftmargin errors."""

    code = "error"


class InputError(CraftMarginError, ValueError):
    """Invalid or negative cost inputs. Surfaced immediately, never retried."""

    code = "input_error"


class ConfigError(CraftMarginError):
    """The config file is unreadable YAML or holds invalid settings."""

    code = "config_error"

    def __init__(self, path: object, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config at {path}: {reason}")


class UnsolvablePriceError(CraftMarginError):
    """The optimal price solve has no positive finite solution."""

    code = "unsolvable_price"

    def __init__(self, target_margin: float, fee_rate: float):
        self.target_margin = target_margin
        self.fee_rate = fee_rate
        super().__init__(
            f"No price reaches a {target_margin:g}% margin when fees take "
            f"{fee_rate * 100:g}% of the price"
        )


class ProviderTransportError(CraftMarginError):
    """A single provider tier failed (network, timeout, non-2xx, bad envelope)."""

    code = "provider_transport"

    def __init__(self, provider: str, message: str, status_code: int | None = None):
        self.provider = provider
        self.status_code = status_code
        super().__init__(f"{provider}: {message}")


class AllProvidersFailedError(CraftMarginError):
    """Every tier of the fallback chain failed."""

    code = "all_providers_failed"

    def __init__(self, errors: list[str] | None = None):
        self.errors = errors or []
        super().__init__("all providers failed")


class ResponseParseError(CraftMarginError):
    """AI text was received but did not match the expected schema."""

    code = "response_parse"

    def __init__(self, schema_name: str, reason: str, raw: str = ""):
        self.schema_name = schema_name
        self.reason = reason
        self.raw = raw
        super().__init__(f"Response did not match {schema_name}: {reason}")


class FeatureNotAvailableError(CraftMarginError):
    """A premium feature was requested without an active entitlement."""

    code = "feature_not_available"

    def __init__(self, feature: str):
        self.feature = feature
        super().__init__(f"Feature '{feature}' requires an active subscription")
