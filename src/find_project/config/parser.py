"""
YAML settings parser for find-project.

This module loads the optional settings file that holds default search
options. It handles settings file discovery, YAML parsing and validation,
and turns every failure into a ConfigurationError with a helpful message.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List, Union
import logging
from dataclasses import dataclass

from pydantic import ValidationError

from ..exceptions import ConfigurationError
from ..models.config import FinderSettings


logger = logging.getLogger(__name__)


@dataclass
class ConfigParseResult:
    """
    Result of settings parsing operation.
    
    Attributes:
        settings: The parsed and validated settings
        config_path: Path to the settings file used
        is_default: Whether built-in defaults were used
    """
    settings: FinderSettings
    config_path: Optional[Path]
    is_default: bool


class ConfigParser:
    """
    YAML settings parser with validation and error handling.
    
    Settings files are searched in the current directory, the home directory
    and ~/.config/find-project, in that order. A missing file is not an
    error: built-in defaults are used instead.
    """
    
    DEFAULT_CONFIG_NAMES = [
        '.findproject.yaml',
        '.findproject.yml',
        'findproject.yaml',
        'findproject.yml'
    ]
    
    def __init__(self, search_paths: Optional[List[Path]] = None):
        """
        Initialize the settings parser.
        
        Args:
            search_paths: Directories searched for a settings file (defaults to cwd, home, XDG dir)
        """
        self.search_paths = search_paths
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
    
    def load_config(self, config_path: Optional[Union[str, Path]] = None) -> ConfigParseResult:
        """
        Load and parse settings from file or use defaults.
        
        Args:
            config_path: Path to settings file. If None, searches for default files.
        
        Returns:
            ConfigParseResult containing parsed settings and metadata
        
        Raises:
            ConfigurationError: If settings are invalid or file cannot be read
        """
        if config_path:
            config_path = Path(config_path).expanduser()
            if not config_path.exists():
                raise ConfigurationError(f"Configuration file not found: {config_path}")
            if not config_path.is_file():
                raise ConfigurationError(f"Configuration path is not a file: {config_path}")
            
            config_data = self._load_yaml_file(config_path)
        else:
            config_path, config_data = self._find_and_load_config()
        
        is_default = config_path is None
        settings = self._validate_config_data(config_data or {}, config_path)
        
        self.logger.debug(f"Settings loaded from {config_path or 'defaults'}: {settings}")
        
        return ConfigParseResult(
            settings=settings,
            config_path=config_path,
            is_default=is_default
        )
    
    def _get_search_paths(self) -> List[Path]:
        if self.search_paths is not None:
            return self.search_paths
        return [
            Path.cwd(),
            Path.home(),
            Path.home() / '.config' / 'find-project',
        ]
    
    def _find_and_load_config(self) -> tuple[Optional[Path], Optional[Dict[str, Any]]]:
        """
        Find and load the settings file from default locations.
        
        A file that exists but is broken is reported, not skipped.
        
        Returns:
            Tuple of (config_path, config_data) or (None, None) if not found
        """
        for search_path in self._get_search_paths():
            for config_name in self.DEFAULT_CONFIG_NAMES:
                config_file = search_path / config_name
                if config_file.is_file():
                    self.logger.debug(f"Found configuration file: {config_file}")
                    return config_file, self._load_yaml_file(config_file)
        
        self.logger.debug("No configuration file found, using defaults")
        return None, None
    
    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load and parse YAML file.
        
        Args:
            file_path: Path to YAML file
        
        Returns:
            Parsed YAML data as dictionary
        
        Raises:
            ConfigurationError: If file cannot be read or parsed
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()
            
            if not content.strip():
                self.logger.warning(f"Configuration file is empty: {file_path}")
                return {}
            
            data = yaml.safe_load(content)
            
            # Comment-only documents load as None
            if data is None:
                return {}
            
            if not isinstance(data, dict):
                raise ConfigurationError(f"Configuration file must contain a YAML object, got {type(data).__name__}")
            
            return data
        
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {file_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e
    
    def _validate_config_data(self, config_data: Dict[str, Any], config_path: Optional[Path]) -> FinderSettings:
        """
        Validate settings data and build the settings model.
        
        Raises:
            ConfigurationError: If settings are invalid
        """
        try:
            return FinderSettings.from_dict(config_data)
        except ValidationError as e:
            source = config_path or 'defaults'
            raise ConfigurationError(f"Configuration validation failed for {source}: {e}") from e


def load_config(config_path: Optional[Union[str, Path]] = None) -> ConfigParseResult:
    """
    Convenience function to load settings.
    
    Args:
        config_path: Path to settings file (optional)
    
    Returns:
        ConfigParseResult containing parsed settings
    
    Raises:
        ConfigurationError: If settings are invalid
    """
    parser = ConfigParser()
    return parser.load_config(config_path)

