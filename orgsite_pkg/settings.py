#!/usr/bin/env python3
"""
Settings loader for org-site projects.
Supports configuration from orgsite.yml, orgsite.yaml, or orgsite.json files.
"""

import os
import json
import logging
import yaml
from dataclasses import dataclass, fields
from typing import Dict, Any, Optional


logger = logging.getLogger('OrgSite')

# Packaged sample configuration copied into new projects
SAMPLE_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'orgsite.yml')


@dataclass
class SiteConfig:
    """Site-wide configuration threaded into the renderer and fragment generators."""

    theme: str = 'default'
    site_title: str = ''
    site_url: str = ''
    author_name: str = ''
    author_email: str = ''
    disqus_shortname: str = ''
    enable_meta_info: bool = False
    enable_comment: bool = False
    load_directory: Optional[str] = None
    date_format: str = '%Y-%m-%d'
    language: str = 'en'

    @classmethod
    def from_dict(cls, settings: Dict[str, Any]) -> 'SiteConfig':
        """Build a config from a settings mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in settings.items():
            if key in known:
                values[key] = value
            else:
                logger.warning(f"Ignoring unknown configuration key: {key}")

        for flag in ('enable_meta_info', 'enable_comment'):
            if flag in values:
                values[flag] = parse_bool(values[flag])
        for key in ('site_title', 'site_url', 'author_name', 'author_email', 'disqus_shortname'):
            if values.get(key) is None:
                values[key] = ''
            else:
                values[key] = str(values.get(key, ''))
        for key, default in (('theme', 'default'), ('date_format', '%Y-%m-%d'), ('language', 'en')):
            if not values.get(key):
                values[key] = default

        return cls(**values)


def parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on', 't')
    return bool(value)


class OrgSiteSettings:
    """Load and manage org-site configuration settings."""

    # Default configuration
    DEFAULT_SETTINGS = {
        'theme': 'default',
        'site_title': '',
        'site_url': '',
        'author_name': '',
        'author_email': '',
        'disqus_shortname': '',
        'enable_meta_info': False,
        'enable_comment': False,
        'load_directory': None,
        'date_format': '%Y-%m-%d',
        'language': 'en',
    }

    # Config file names to look for (in order of preference)
    CONFIG_FILES = ['orgsite.yml', 'orgsite.yaml', 'orgsite.json']

    def __init__(self, config_dir: str = None):
        """
        Initialize settings loader.

        Args:
            config_dir: Directory to look for config files. Defaults to current directory.
        """
        self.config_dir = config_dir or os.getcwd()
        self.settings = self.DEFAULT_SETTINGS.copy()
        self.config_file_path = None

    def load_settings(self, required: bool = False) -> Dict[str, Any]:
        """
        Load settings from the project's configuration file.

        Args:
            required: Raise FileNotFoundError when no configuration file exists

        Returns:
            Dictionary of configuration settings
        """
        config_file = self._find_config_file()

        if config_file is None:
            if required:
                raise FileNotFoundError(
                    f"No configuration file ({', '.join(self.CONFIG_FILES)}) found in {self.config_dir}"
                )
            logger.debug(f"No configuration file in {self.config_dir}, using defaults")
            return self.settings.copy()

        self.config_file_path = config_file
        loaded_settings = self._load_config_file(config_file)
        if loaded_settings:
            # Merge with defaults, giving preference to loaded settings
            self.settings.update(loaded_settings)
        logger.info(f"Loaded configuration from: {config_file}")

        return self.settings.copy()

    def _find_config_file(self) -> Optional[str]:
        """
        Find the first available configuration file.

        Returns:
            Path to config file or None if not found
        """
        for filename in self.CONFIG_FILES:
            config_path = os.path.join(self.config_dir, filename)
            if os.path.exists(config_path):
                return config_path
        return None

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from a file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Dictionary of configuration settings
        """
        file_ext = os.path.splitext(config_path)[1].lower()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if file_ext in ['.yml', '.yaml']:
                    data = yaml.safe_load(f)
                elif file_ext == '.json':
                    data = json.load(f)
                else:
                    raise ValueError(f"Unsupported config file format: {file_ext}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {config_path}: {e}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file {config_path}: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {config_path}")
        return data

    def merge_with_args(self, args_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge configuration settings with command-line arguments.
        Command-line arguments take precedence over config file settings.

        Args:
            args_dict: Dictionary of command-line arguments

        Returns:
            Merged configuration dictionary
        """
        merged = self.settings.copy()

        for key, value in args_dict.items():
            if value is not None and key in self.DEFAULT_SETTINGS:
                merged[key] = value

        return merged

    def to_config(self, args_dict: Optional[Dict[str, Any]] = None) -> SiteConfig:
        """Return the current settings (optionally merged with arguments) as a SiteConfig."""
        merged = self.merge_with_args(args_dict or {})
        return SiteConfig.from_dict(merged)
