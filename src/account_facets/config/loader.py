"""
Configuration Loader - YAML Loading with Validation.

Loads the engine configuration from YAML, optionally deep-merging a
named profile from ``config/profiles/<profile>.yaml`` on top, and
validates the result with the Pydantic models.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from account_facets.config.models import EngineConfig

logger = logging.getLogger(__name__)

PROFILES_DIR = Path("config") / "profiles"


class ProfileNotFoundError(FileNotFoundError):
    """Raised when a named profile has no YAML file under config/profiles/."""

    def __init__(self, profile: str, available: List[str]) -> None:
        self.profile = profile
        self.available = available
        choices = ", ".join(available) or "none"
        super().__init__(f"Profile not found: {profile} (available: {choices})")


class ConfigLoader:
    """Loads and validates configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths and profiles
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> EngineConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file
            profile: Optional profile name to merge

        Returns:
            Validated EngineConfig object

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ProfileNotFoundError: If the profile is not under config/profiles/
            pydantic.ValidationError: If config is invalid
        """
        path = self._resolve_path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        config_dict = self._load_yaml(path)

        if profile:
            profile_dict = self._load_profile(profile)
            config_dict = self._merge_configs(config_dict, profile_dict)
            logger.info(f"Loaded config {path} with profile '{profile}'")
        else:
            logger.info(f"Loaded config {path}")

        return EngineConfig.model_validate(config_dict)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> EngineConfig:
        """Validate a configuration given as a dictionary."""
        return EngineConfig.model_validate(config_dict)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def available_profiles(self) -> List[str]:
        """Profile names found under config/profiles/, sorted."""
        profiles_dir = self._base_path / PROFILES_DIR
        if not profiles_dir.is_dir():
            return []
        return sorted(p.stem for p in profiles_dir.glob("*.yaml"))

    def _load_profile(self, profile: str) -> Dict[str, Any]:
        available = self.available_profiles()
        if profile not in available:
            raise ProfileNotFoundError(profile, available)
        overlay = self._load_yaml(self._base_path / PROFILES_DIR / f"{profile}.yaml")
        unknown = sorted(set(overlay) - set(EngineConfig.model_fields))
        if unknown:
            raise ValueError(f"Profile '{profile}' has unknown sections: {unknown}")
        return overlay

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Deep merge overlay into base; overlay wins on scalars."""
        result = dict(base)
        for key, value in overlay.items():
            if isinstance(result.get(key), dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> EngineConfig:
    """Convenience function to load configuration."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
