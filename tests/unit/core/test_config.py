# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import dataclasses

import pytest

from wams_tables.core.config import ServiceConfig


def test_defaults():
    config = ServiceConfig(service_url="https://x/tables/", app_key="k")
    assert config.auth_key is None
    assert config.master_key is None
    assert config.http_timeout is None


def test_frozen():
    config = ServiceConfig(service_url="https://x/tables/", app_key="k")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.app_key = "other"


def test_independent_configs_coexist():
    a = ServiceConfig(service_url="https://a/tables/", app_key="ka")
    b = ServiceConfig(service_url="https://b/tables/", app_key="kb", master_key="m")
    assert a.service_url != b.service_url
    assert a.master_key is None


def test_from_env(monkeypatch):
    monkeypatch.setenv("WAMS_SERVICE_URL", "https://env/tables/")
    monkeypatch.setenv("WAMS_APP_KEY", "app")
    monkeypatch.setenv("WAMS_AUTH_KEY", "")
    monkeypatch.setenv("WAMS_MASTER_KEY", "master")
    monkeypatch.setenv("WAMS_HTTP_TIMEOUT", "2.5")
    config = ServiceConfig.from_env()
    assert config == ServiceConfig(
        service_url="https://env/tables/", app_key="app", auth_key=None, master_key="master", http_timeout=2.5
    )


def test_from_env_unset(monkeypatch):
    for name in ("WAMS_SERVICE_URL", "WAMS_APP_KEY", "WAMS_AUTH_KEY", "WAMS_MASTER_KEY", "WAMS_HTTP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    config = ServiceConfig.from_env()
    assert config.service_url == ""
    assert config.app_key == ""
    assert config.http_timeout is None


def test_from_env_bad_timeout(monkeypatch):
    monkeypatch.setenv("WAMS_HTTP_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        ServiceConfig.from_env()
