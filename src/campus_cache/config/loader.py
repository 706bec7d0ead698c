"""
Configuration Loader - Cache Settings from YAML.

Cache settings usually live inside an application's own config file, so
the loader can read either a whole file or one nested section of it
(e.g. ``services.registrar.cache``).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from campus_cache.config.models import CacheLibraryConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Reads YAML and validates it into a CacheLibraryConfig."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        section: Optional[str] = None,
    ) -> CacheLibraryConfig:
        """
        Load cache configuration from a YAML file.

        Args:
            config_path: YAML file, relative paths resolved against base_path
            section: Dotted path to the mapping holding the cache settings;
                None reads the whole document

        Returns:
            Validated CacheLibraryConfig

        Raises:
            FileNotFoundError: If the file doesn't exist
            KeyError: If ``section`` is missing or not a mapping
            ValidationError: If the settings are invalid
        """
        path = self._resolve_path(config_path)
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f) or {}

        if section:
            document = self._select_section(document, section)
        logger.debug(f"Loaded cache config from {path} (section={section})")
        return self.load_from_dict(document)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> CacheLibraryConfig:
        """Validate an already parsed mapping."""
        return CacheLibraryConfig.model_validate(config_dict)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    @staticmethod
    def _select_section(document: Dict[str, Any], section: str) -> Dict[str, Any]:
        node: Any = document
        for part in section.split("."):
            if not isinstance(node, dict) or part not in node:
                raise KeyError(f"Config section not found: {section}")
            node = node[part]
        if node is None:
            return {}
        if not isinstance(node, dict):
            raise KeyError(f"Config section is not a mapping: {section}")
        return node


def load_config(
    config_path: Union[str, Path],
    section: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> CacheLibraryConfig:
    """
    Convenience function to load configuration.

    Example:
        >>> config = load_config("app.yaml", section="services.registrar.cache")
    """
    return ConfigLoader(base_path=base_path).load(config_path, section)
