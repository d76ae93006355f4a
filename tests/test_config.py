from __future__ import annotations

import pytest

from pyviewport.config import US_BOUNDS, US_EU_BOUNDS, ViewportConfig, is_wide_viewport_device
from pyviewport.exceptions import ViewportConfigError


def test_defaults() -> None:
    config = ViewportConfig()

    assert config.default_bounds(True) == US_EU_BOUNDS
    assert config.default_bounds(False) == US_BOUNDS
    assert (config.min_zoom, config.max_zoom) == (2, 14)
    assert config.receipt_kind == "poc_receipts_v1"


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYVIEWPORT_BASE_URL", "https://example.test/v1")
    monkeypatch.setenv("PYVIEWPORT_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("PYVIEWPORT_MAX_ZOOM", "16")

    config = ViewportConfig.from_env()

    assert config.base_url == "https://example.test/v1"
    assert config.request_timeout == 2.5
    assert config.max_zoom == 16


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYVIEWPORT_VALIDATORS_TTL", "60")

    config = ViewportConfig.from_env(validators_ttl=5.0)

    assert config.validators_ttl == 5.0


def test_from_env_rejects_bad_numbers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYVIEWPORT_MIN_ZOOM", "two")

    with pytest.raises(ViewportConfigError, match="PYVIEWPORT_MIN_ZOOM"):
        ViewportConfig.from_env()


def test_inverted_zoom_range_is_rejected() -> None:
    with pytest.raises(ViewportConfigError):
        ViewportConfig(min_zoom=10, max_zoom=5)


def test_non_positive_timeout_is_rejected() -> None:
    with pytest.raises(ViewportConfigError):
        ViewportConfig(request_timeout=0)


@pytest.mark.parametrize(("width", "expected"), [(375, False), (1223, False), (1224, True), (2560, True)])
def test_device_class_probe(width: int, expected: bool) -> None:
    assert is_wide_viewport_device(width) is expected
