"""Configuration file parser."""

import logging
from abc import ABC, abstractproperty
from io import StringIO
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO, Type, TypeVar

import yaml

T = TypeVar("T", bound="Config")

CONFIG_NAME = "routemap.yml"


class Config(ABC):

    """Abstract base class for YAML configuration.

    Subclasses should override abstract properties "required" and "optional".

    Example usage:

        # Assuming MyConfig is a subclass of Config:
        cfg = MyConfig.load(Path("/path/to/config.yml"))
        cfg.validate()

    Note that the creator must call validate(). They can optionally pass extra
    defaults as keyword arguments, which override the static defaults.
    """

    def __init__(self, path: Optional[Path], data: Mapping[str, Any]):
        self.path = path
        self.data = data

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"{name}(path={self.path!r}, data={self.data!r})"

    @abstractproperty
    def required(self) -> Dict[str, Any]:
        """Required configuration keys and their defaults."""

    @abstractproperty
    def optional(self) -> Dict[str, Any]:
        """Optional configuration keys and their defaults."""

    def validate(self, **defaults: Any):
        """Validate the loaded configuration.

        Missing required keys are logged as errors and unknown keys as
        warnings. Values whose type differs from the default's are logged as
        errors and replaced by the default.
        """
        known = {**self.required, **self.optional}
        for key in self.required:
            if key not in self.data:
                logging.error("%s: missing %r", self.path, key)
        for key in self.data:
            if key not in known:
                logging.warning("%s: unknown key %r", self.path, key)
        merged = {**known, **defaults, **self.data}
        for key, default in known.items():
            value = merged[key]
            if default is not None and type(value) is not type(default):
                logging.error(
                    "%s: %r should be %s, got %r",
                    self.path,
                    key,
                    type(default).__name__,
                    value,
                )
                merged[key] = defaults.get(key, default)
        self.data = merged

    @classmethod
    def default(cls: Type[T]) -> T:
        """Create a configuration with no file and all defaults."""
        cfg = cls(None, {})
        cfg.validate()
        return cfg

    @classmethod
    def load(cls: Type[T], path: Path) -> T:
        """Load configuration from a file."""
        with open(path) as f:
            return cls.load_from(path, f)

    @classmethod
    def loads(cls: Type[T], path: Optional[Path], content: str) -> T:
        """Load configuration from a string."""
        return cls.load_from(path, StringIO(content))

    @classmethod
    def load_from(cls: Type[T], path: Optional[Path], content: TextIO) -> T:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as ex:
            logging.error("cannot parse %s: %s", path, ex)
            data = {}
        if data is None:
            data = {}
        if not isinstance(data, dict):
            logging.error("invalid YAML in %s: %s", path, type(data))
            data = {}
        return cls(path, data)

    def __getitem__(self, key: str) -> Any:
        """Get a configuration value."""
        return self.data[key]

    def get(self, key: str) -> Optional[Any]:
        """Get a configuration value, or None if it does not exist."""
        return self.data.get(key)


class RouteMapConfig(Config):

    required: Dict[str, Any] = {}

    optional = {
        "index_base": 1,
        "check_bounds": True,
        "encoding": "utf-8",
        "title": "Airline routes",
    }

    @classmethod
    def find(cls, path: Optional[Path] = None) -> "RouteMapConfig":
        """Load the configuration for a run.

        Uses path if given (it must exist), otherwise routemap.yml in the
        current directory if there is one, otherwise the defaults.
        """
        if path is None:
            candidate = Path.cwd() / CONFIG_NAME
            if not candidate.is_file():
                logging.debug("no %s found, using defaults", CONFIG_NAME)
                return cls.default()
            path = Path(CONFIG_NAME)
        logging.info("loading configuration from %s", path)
        cfg = cls.load(path)
        cfg.validate()
        return cfg
