"""
Converter configuration.

Configuration is a JSON object, either flat or nested under a
``"converter"`` key:

    {
        "converter": {
            "prefixes": {"ex": "http://example.org/"},
            "base_iri": "http://example.org/",
            "logging": {"level": "DEBUG", "format": "json"}
        }
    }
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ConverterConfig:
    """Configuration for serializing quads."""
    prefixes: Dict[str, str] = field(default_factory=dict)
    base_iri: Optional[str] = None
    logging: Dict[str, Any] = field(default_factory=dict)
    
    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ConverterConfig':
        """Create ConverterConfig from a dictionary."""
        if not isinstance(config_dict, dict):
            raise TypeError(f"config_dict must be a dict, got {type(config_dict)}")
        
        converter_config = config_dict.get('converter', config_dict)
        
        prefixes = converter_config.get('prefixes') or {}
        if not isinstance(prefixes, dict):
            raise ValueError(f"'prefixes' must be a JSON object, got {type(prefixes)}")
        
        logging_config = converter_config.get('logging') or {}
        if not isinstance(logging_config, dict):
            raise ValueError(f"'logging' must be a JSON object, got {type(logging_config)}")
        
        return cls(
            prefixes={str(prefix): str(namespace) for prefix, namespace in prefixes.items()},
            base_iri=converter_config.get('base_iri'),
            logging=dict(logging_config),
        )
    
    @classmethod
    def from_file(cls, config_path: str) -> 'ConverterConfig':
        """Load configuration from a JSON file."""
        if not config_path:
            raise ValueError("config_path cannot be empty")
        
        if not isinstance(config_path, str):
            raise TypeError(f"config_path must be string, got {type(config_path)}")
        
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = json.load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file {config_path}: {e}")
        except UnicodeDecodeError as e:
            raise ValueError(f"Encoding error reading {config_path}: {e}")
        except PermissionError:
            raise PermissionError(f"Permission denied reading {config_path}")
        
        if not isinstance(config_dict, dict):
            raise ValueError(f"Configuration file must contain a JSON object, got {type(config_dict)}")
        
        return cls.from_dict(config_dict)
