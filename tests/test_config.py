# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from fieldguard import Validator
from fieldguard.config import Settings, get_settings, load_settings, reset_settings
from fieldguard.exceptions import ConfigurationError


def test_defaults():
    settings = load_settings({})

    assert settings == Settings(path_separator=".", metrics_enabled=True)


@pytest.mark.parametrize("raw", ["", "0", "false", "No", " FALSE "])
def test_metrics_can_be_disabled(raw):
    assert load_settings({"FIELDGUARD_METRICS": raw}).metrics_enabled is False


def test_metrics_enabled_for_other_values():
    assert load_settings({"FIELDGUARD_METRICS": "yes"}).metrics_enabled is True


def test_custom_separator():
    assert load_settings({"FIELDGUARD_PATH_SEPARATOR": "/"}).path_separator == "/"


def test_empty_separator_is_rejected():
    with pytest.raises(ConfigurationError, match="FIELDGUARD_PATH_SEPARATOR"):
        load_settings({"FIELDGUARD_PATH_SEPARATOR": ""})


def test_get_settings_is_cached_until_reset(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("FIELDGUARD_PATH_SEPARATOR", "::")

    assert get_settings() is first

    reset_settings()
    assert get_settings().path_separator == "::"


def test_validator_picks_up_environment(monkeypatch):
    monkeypatch.setenv("FIELDGUARD_PATH_SEPARATOR", "->")
    reset_settings()

    validator = Validator.of({"inner": {}}).map(
        "inner", lambda d: d["inner"], lambda inner: inner.non_null("key", lambda d: d.get("key"))
    )

    assert validator.violations == {"inner->key": ["must not be NULL"]}
