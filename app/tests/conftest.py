"""Shared fixtures for the localekit test suite."""

import pytest

from localekit.configuration import I18nSettings
from tests.factories.i18n import make_translation_tree

I18N_ENV_VARS = ("LOCALES_DIR", "DEFAULT_LOCALE", "FALLBACK_LOCALE")


@pytest.fixture
def i18n_settings(monkeypatch):
    """I18nSettings built with no i18n variables in the environment."""
    for name in I18N_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return I18nSettings()


@pytest.fixture
def translation_tree():
    """English translation tree covering every node kind."""
    return make_translation_tree()
