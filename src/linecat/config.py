"""Persisted feature defaults and their merge with command-line flags."""

import logging
import tomllib
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .models import FeatureConfig, StoredDefaults

logger = logging.getLogger(__name__)


def load_defaults(config_file: Optional[Path]) -> StoredDefaults:
    """Load feature defaults from a TOML file.

    A missing file yields all-off defaults. A file that cannot be read or
    parsed is reported as a warning and also yields all-off defaults, so a
    broken profile never prevents plain output.

    Args:
        config_file: Path to ``linecat.toml`` or None to skip loading

    Returns:
        StoredDefaults model
    """
    if config_file is None or not config_file.exists():
        logger.debug("No defaults file at %s", config_file)
        return StoredDefaults()

    try:
        data = tomllib.loads(config_file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read %s: %s; using built-in defaults", config_file, e)
        return StoredDefaults()
    except tomllib.TOMLDecodeError as e:
        logger.warning("Invalid TOML in %s: %s; using built-in defaults", config_file, e)
        return StoredDefaults()

    try:
        defaults = StoredDefaults.model_validate(data)
    except ValidationError as e:
        logger.warning(
            "Invalid settings in %s: %s; using built-in defaults",
            config_file,
            e.errors()[0]["msg"],
        )
        return StoredDefaults()

    logger.debug("Loaded defaults from %s: %s", config_file, defaults.model_dump())
    return defaults


def build_feature_config(
    defaults: StoredDefaults,
    *,
    number: bool = False,
    dollar: bool = False,
    tabs: bool = False,
    squeeze: bool = False,
    pages: bool = False,
    search_text: Optional[str] = None,
    ignore_case: bool = False,
    encode_base64: bool = False,
    decode_base64: bool = False,
) -> FeatureConfig:
    """Combine stored defaults with flags; a switch is on if either enables it.

    Raises:
        ConfigConflictError: If mutually exclusive features are requested
    """
    return FeatureConfig(
        number=number or defaults.number_feature,
        dollar=dollar or defaults.dollar_sign_feature,
        tabs=tabs or defaults.tabs_feature,
        squeeze=squeeze or defaults.compress_empty_line_feature,
        pages=pages or defaults.pagination_feature,
        search_text=search_text,
        ignore_case=ignore_case,
        encode_base64=encode_base64,
        decode_base64=decode_base64,
    )


__all__ = ["build_feature_config", "load_defaults"]
