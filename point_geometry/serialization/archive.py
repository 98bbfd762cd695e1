"""
Point Archive

Versioned YAML storage of named points, built on the record mapping.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .records import to_record, from_record, type_name, resolve_type
from ..utils.config_manager import ConfigManager


SUPPORTED_FORMAT_VERSIONS = (1,)


class PointArchive:
    """Saves and loads collections of named points as YAML documents."""

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        """
        Initialize point archive.

        Args:
            config_manager: Configuration manager instance
        """
        self.config = config_manager or ConfigManager()
        self.logger = logging.getLogger(__name__)

        self.format_version = self.config.get_format_version()
        if self.format_version not in SUPPORTED_FORMAT_VERSIONS:
            raise ValueError(f"Unsupported archive format version: {self.format_version}")

        self.logger.info(f"Point archive initialized: format_version={self.format_version}")

    def to_document(self, points: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Build the archive document for a mapping of named points.

        Args:
            points: Mapping from name to point value

        Returns:
            Plain dict ready for YAML serialization
        """
        entries = []
        for name, point in points.items():
            entries.append({
                'name': str(name),
                'type': type_name(point),
                'record': to_record(point),
            })
            self.logger.debug(f"Archived {name}: {point}")

        return {'format_version': self.format_version, 'points': entries}

    def from_document(self, document: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Rebuild named points from an archive document.

        Args:
            document: Parsed archive document

        Returns:
            Dict mapping name to point value, in document order
        """
        if not isinstance(document, Mapping):
            raise ValueError("Archive document must be a mapping")

        version = document.get('format_version')
        if version not in SUPPORTED_FORMAT_VERSIONS:
            raise ValueError(f"Unsupported archive format version: {version}")

        entries = document.get('points')
        if entries is None:
            entries = []
        if not isinstance(entries, list):
            raise ValueError(f"Archive 'points' must be a list, got {type(entries).__name__}")

        points = {}
        for entry in entries:
            try:
                name = str(entry['name'])
                cls = resolve_type(entry['type'])
                record = entry['record']
            except (KeyError, TypeError):
                raise ValueError(f"Malformed archive entry: {entry!r}") from None

            if name in points:
                raise ValueError(f"Duplicate point name in archive: {name}")
            points[name] = from_record(cls, record)

        return points

    def save(self, points: Mapping[str, Any], path: Union[str, Path]) -> None:
        """
        Save named points to a YAML file.

        Args:
            points: Mapping from name to point value
            path: Output file path
        """
        document = self.to_document(points)

        with open(path, 'w') as file:
            yaml.safe_dump(document, file, default_flow_style=False, sort_keys=False)

        self.logger.info(f"Saved {len(points)} points to {path}")

    def load(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Load named points from a YAML file.

        Args:
            path: Archive file path

        Returns:
            Dict mapping name to point value
        """
        try:
            with open(path, 'r') as file:
                document = yaml.safe_load(file)
        except FileNotFoundError:
            raise FileNotFoundError(f"Archive file not found: {path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing archive file: {e}")

        points = self.from_document(document)
        self.logger.info(f"Loaded {len(points)} points from {path}")
        return points
