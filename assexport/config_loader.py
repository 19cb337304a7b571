"""Handles loading subtitle documents from YAML files."""

import yaml
import os
import logging
from .exceptions import ConfigurationError
from .models import Subtitle

logger = logging.getLogger(__name__)

class ConfigLoader:
    """Loads a subtitle document description from a YAML (or JSON) file."""

    def load_config(self, config_path: str) -> dict:
        """
        Loads the document mapping from the specified YAML file path.

        JSON files are accepted too, since YAML is a superset of JSON.

        Args:
            config_path: The path to the YAML document.

        Returns:
            A dictionary with the camelCase document keys.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If the file cannot be parsed as YAML or
                              if there are other reading errors.
        """
        logger.info(f"Attempting to load subtitle document from: {config_path}")
        if not os.path.exists(config_path):
            logger.error(f"Subtitle document not found at path: {config_path}")
            raise FileNotFoundError(f"Subtitle document not found: {config_path}")
        if not os.path.isfile(config_path):
             logger.error(f"Subtitle document path is not a file: {config_path}")
             raise ConfigurationError(f"Subtitle document path is not a file: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML document {config_path}: {e}", exc_info=True)
            raise ConfigurationError(f"Invalid YAML format in {config_path}: {e}") from e
        except (IOError, UnicodeDecodeError) as e:
            logger.error(f"Error reading subtitle document {config_path}: {e}", exc_info=True)
            raise ConfigurationError(f"Could not read subtitle document {config_path}: {e}") from e

        if not isinstance(config, dict):
            # e.g. an empty file or a bare scalar
            logger.error(f"Subtitle document {config_path} did not load as a dictionary (root object).")
            raise ConfigurationError(f"Invalid YAML structure in {config_path}. Root must be a mapping (dictionary).")
        logger.info(f"Subtitle document loaded successfully from {config_path}")
        return config


def load_subtitle(config_path: str) -> Subtitle:
    """
    Reads a YAML or JSON document and builds a Subtitle from it.

    Args:
        config_path: Path to the document.

    Returns:
        The Subtitle described by the file. It is not validated here.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the file is unreadable or a field has the wrong type.
    """
    config = ConfigLoader().load_config(config_path)
    try:
        return Subtitle.from_dict(config)
    except ConfigurationError as e:
        logger.error(f"Invalid subtitle document {config_path}: {e}")
        raise
