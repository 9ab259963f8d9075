"""Feature-level fixtures for i18n system tests.

Provides locale files on disk and translators loaded with sample data.
"""

import json

import pytest
import yaml

from localekit.i18n import FileTranslationLoader, Translator
from tests.factories.i18n import make_formats_block, make_translation_tree


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample locale files.

    Returns a directory structure like:
    - en.json
    - fr.json (with a _formats block)
    - ru.yml
    - notes.txt (ignored by the loader)
    """
    with open(tmp_path / "en.json", "w", encoding="utf-8") as f:
        json.dump(make_translation_tree(), f)

    fr = {
        "_formats": make_formats_block(
            symbol="€", thousand_separator=" ", decimal_symbol=","
        ),
        "greeting": "Bonjour %{name} !",
        "items": {"one": "{} article", "other": "{} articles"},
    }
    with open(tmp_path / "fr.json", "w", encoding="utf-8") as f:
        json.dump(fr, f, ensure_ascii=False)

    ru = {
        "items": {
            "one": "{} предмет",
            "few": "{} предмета",
            "many": "{} предметов",
            "other": "{} предмета",
        }
    }
    with open(tmp_path / "ru.yml", "w", encoding="utf-8") as f:
        yaml.safe_dump(ru, f, allow_unicode=True)

    (tmp_path / "notes.txt").write_text("not a locale", encoding="utf-8")

    return tmp_path


@pytest.fixture
def file_loader():
    """Create FileTranslationLoader."""
    return FileTranslationLoader()


@pytest.fixture
def translator(translation_tree):
    """Create Translator with the English sample tree active."""
    translator = Translator()
    translator.load_tree("en", translation_tree)
    translator.set_locale("en")
    return translator


@pytest.fixture
def sample_formats():
    """Formats block with "$" currency and "," grouping."""
    return make_formats_block()
