"""Translation loading interface and implementations.

Reads locale files into plain nested mappings. The translator never touches
the filesystem itself; it receives the parsed tree from a loader.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

import yaml

import structlog
from localekit.i18n.exceptions import ConfigLoadError
from localekit.i18n.models import deep_merge

logger = structlog.get_logger()

PathLike = Union[str, Path]

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yml", ".yaml")


def locale_from_path(path: PathLike) -> str:
    """Derive a locale id from a file path.

    Strips the directory and the last extension:
    "locales/en-US.json" -> "en-US".

    Raises:
        ConfigLoadError: If nothing is left after stripping.
    """
    name = str(path).replace("\\", "/").rsplit("/", 1)[-1]
    dot = name.rfind(".")
    if dot != -1:
        name = name[:dot]
    if not name:
        raise ConfigLoadError(str(path), "cannot extract locale from file name")
    return name


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations define how a locale source is read and parsed into a
    nested mapping.
    """

    @abstractmethod
    def load(self, path: PathLike) -> Dict[str, Any]:
        """Load and parse one locale source.

        Args:
            path: Location of the locale source.

        Returns:
            Parsed translation tree.

        Raises:
            ConfigLoadError: If the source cannot be read or parsed.
        """
        pass

    @abstractmethod
    def load_directory(self, directory: PathLike) -> Dict[str, Dict[str, Any]]:
        """Load every locale source found in a directory.

        Returns:
            Dict mapping locale id to its parsed tree.
        """
        pass


class FileTranslationLoader(TranslationLoader):
    """Loader for JSON and YAML locale files.

    The format is chosen by file extension; ``.json`` files are parsed with
    the json module and ``.yml``/``.yaml`` files with ``yaml.safe_load``.
    Any other extension is parsed as JSON.
    """

    def load(self, path: PathLike) -> Dict[str, Any]:
        """Read and parse a locale file.

        Raises:
            ConfigLoadError: If the file cannot be opened, fails to parse, or
                does not contain a mapping at the top level.
        """
        file_path = Path(path)
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                if file_path.suffix.lower() in YAML_SUFFIXES:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except OSError as e:
            logger.error("locale_file_open_error", file=str(file_path), error=str(e))
            raise ConfigLoadError(str(file_path), f"failed to open: {e}") from e
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
            logger.error("locale_file_parse_error", file=str(file_path), error=str(e))
            raise ConfigLoadError(str(file_path), f"failed to parse: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            logger.error(
                "invalid_locale_file_format", file=str(file_path), expected="mapping"
            )
            raise ConfigLoadError(
                str(file_path),
                f"expected a mapping at top level, got {type(data).__name__}",
            )

        logger.info("loaded_locale_file", file=str(file_path), key_count=len(data))
        return data

    def load_directory(self, directory: PathLike) -> Dict[str, Dict[str, Any]]:
        """Load all JSON/YAML locale files in a directory.

        Files are read in name order; two files naming the same locale (e.g.
        ``en.json`` and ``en.yml``) are deep-merged, later files winning.

        Raises:
            ConfigLoadError: If the directory does not exist or a file fails
                to load.
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise ConfigLoadError(str(directory), "translations directory not found")

        trees: Dict[str, Dict[str, Any]] = {}
        for file_path in sorted(directory.iterdir()):
            if not file_path.is_file() or file_path.suffix.lower() not in (
                JSON_SUFFIXES + YAML_SUFFIXES
            ):
                continue
            locale = locale_from_path(file_path)
            deep_merge(trees.setdefault(locale, {}), self.load(file_path))

        logger.info(
            "loaded_locale_directory",
            translations_dir=str(directory),
            locale_count=len(trees),
        )
        return trees
