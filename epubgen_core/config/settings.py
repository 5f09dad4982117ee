"""
Configuration Settings
======================

Configuration dataclasses for EPUB package builds.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Dict, Any
import json
import logging
import posixpath

import yaml

logger = logging.getLogger(__name__)

# The container file is required to live at this path
CONTAINER_PATH = "META-INF/container.xml"


@dataclass
class PackagingConfig:
    """Packaging-related configuration."""

    metadata_root: str = "epub"
    content_root: str = "epub/content"
    package_document_name: str = "document.opf"
    navigation_name: str = "nav.xhtml"
    cover_name: str = "cover.xhtml"
    navigation_heading: str = "Table of Contents"
    compression_level: int = 9  # ZIP compression level (0-9)
    strict_markup: bool = True  # Missing <head> raises instead of skipping styles
    pretty_print: bool = True

    @property
    def package_document_path(self) -> str:
        """Path to the package document, relative to the archive root."""
        return posixpath.join(self.metadata_root, self.package_document_name)

    @property
    def navigation_path(self) -> str:
        return posixpath.join(self.metadata_root, self.navigation_name)

    @property
    def cover_path(self) -> str:
        return posixpath.join(self.metadata_root, self.cover_name)

    def chapter_path(self, number: int) -> str:
        """Path to the XHTML file of the one-based chapter ``number``."""
        return posixpath.join(self.content_root, f"chapter-{number}.xhtml")

    def stylesheet_path(self, name: str) -> str:
        return posixpath.join(self.metadata_root, f"{name}.css")


@dataclass
class EpubConfig:
    """
    Complete build configuration.

    Example:
        config = EpubConfig()
        config.packaging.metadata_root = "OEBPS"
        config.packaging.content_root = "OEBPS/text"
        save_config(config, Path("epub.yaml"))
    """

    packaging: PackagingConfig = field(default_factory=PackagingConfig)

    # General settings
    log_level: str = "INFO"

    # Custom extensions
    custom: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'packaging': asdict(self.packaging),
            'log_level': self.log_level,
            'custom': self.custom,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'EpubConfig':
        """Create from dictionary."""
        config = cls()

        if 'packaging' in data:
            config.packaging = PackagingConfig(**data['packaging'])
        if 'log_level' in data:
            config.log_level = data['log_level']
        if 'custom' in data:
            config.custom = data['custom']

        return config


def load_config(config_path: Path) -> EpubConfig:
    """
    Load configuration from file.

    Supports JSON and YAML formats based on file extension.

    Args:
        config_path: Path to config file

    Returns:
        EpubConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is not supported
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, 'r', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            data = yaml.safe_load(f) or {}
        elif suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    logger.info(f"Loaded configuration from {config_path}")
    return EpubConfig.from_dict(data)


def save_config(config: EpubConfig, config_path: Path) -> None:
    """
    Save configuration to file.

    Supports JSON and YAML formats based on file extension.

    Args:
        config: EpubConfig to save
        config_path: Path to save config file

    Raises:
        ValueError: If file format is not supported
    """
    suffix = config_path.suffix.lower()
    data = config.to_dict()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
        elif suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    logger.info(f"Saved configuration to {config_path}")


def get_default_config() -> EpubConfig:
    """Get default configuration."""
    return EpubConfig()


def configure_logging(config: EpubConfig) -> None:
    """Apply the configured log level to the library's loggers."""
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.log_level}")
    logging.getLogger("epubgen_core").setLevel(level)
