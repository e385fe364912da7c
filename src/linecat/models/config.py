"""Pydantic models for feature selection and the persisted defaults file."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from ..errors import ConfigConflictError

REGEX_PREFIX = "reg:"


class StoredDefaults(BaseModel):
    """Feature switches read from ``linecat.toml``.

    Every switch defaults to off. Unknown keys are ignored so that older
    binaries keep working with newer files.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    number_feature: bool = False
    dollar_sign_feature: bool = False
    tabs_feature: bool = False
    compress_empty_line_feature: bool = False
    pagination_feature: bool = False


class FeatureConfig(BaseModel):
    """Immutable set of enabled features and their parameters."""

    model_config = ConfigDict(frozen=True)

    number: bool = False
    dollar: bool = False
    tabs: bool = False
    squeeze: bool = False
    pages: bool = False
    search_text: Optional[str] = None
    ignore_case: bool = False
    encode_base64: bool = False
    decode_base64: bool = False

    @model_validator(mode="after")
    def check_exclusive(self) -> "FeatureConfig":
        """Reject combinations that cannot be applied together.

        Raises ``ConfigConflictError`` directly (not a ``ValueError``) so it
        reaches the CLI unwrapped.
        """
        if self.encode_base64 and self.decode_base64:
            raise ConfigConflictError(
                "--encode-base64 and --decode-base64 cannot be used together"
            )
        if self.encoding and self.search_text is not None:
            raise ConfigConflictError(
                "--search cannot be combined with base64 encoding or decoding"
            )
        return self

    @property
    def encoding(self) -> bool:
        return self.encode_base64 or self.decode_base64

    @property
    def is_regex(self) -> bool:
        return self.search_text is not None and self.search_text.startswith(
            REGEX_PREFIX
        )

    @property
    def line_features(self) -> list[str]:
        """Names of the enabled non-encoding line features."""
        names = []
        if self.search_text is not None:
            names.append("search")
        if self.squeeze:
            names.append("squeeze-blank")
        if self.tabs:
            names.append("tabs")
        if self.dollar:
            names.append("dollar")
        if self.number:
            names.append("number")
        return names


__all__ = ["FeatureConfig", "REGEX_PREFIX", "StoredDefaults"]
