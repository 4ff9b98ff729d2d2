"""YAML settings for the wg command."""

import logging
from abc import ABC, abstractproperty
from io import StringIO
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO, Type, TypeVar

import yaml

T = TypeVar("T", bound="Config")


class Config(ABC):

    """Settings read from a YAML mapping.

    A subclass lists its keys in "required" and "optional", each with a
    default. Reading a file never fails outright: unreadable YAML is logged
    and treated as an empty mapping. Defaults are only filled in by
    validate(), which the caller runs once after loading:

        cfg = ReportConfig.load(Path("weightgraph.yml"))
        cfg.validate()

    Use empty() when there is no file at all.
    """

    def __init__(self, path: Optional[Path], data: Mapping[str, Any]):
        self.path = path
        self.data = data

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"{name}(path={self.path!r}, data={self.data!r})"

    @abstractproperty
    def required(self) -> Dict[str, Any]:
        """Keys that must appear in the file, with the value used if missing."""

    @abstractproperty
    def optional(self) -> Dict[str, Any]:
        """Keys that may be left out, with their defaults."""

    @property
    def source(self) -> str:
        """Name used for this config in log messages."""
        return str(self.path) if self.path else "<defaults>"

    def validate(self, **defaults: Any):
        """Check the keys and merge in defaults.

        A missing required key is an error and an unrecognized key is a
        warning. Keyword arguments take precedence over the class defaults
        but not over values from the file.
        """
        for key in self.required:
            if key not in self.data:
                logging.error("%s: missing %r", self.source, key)
        for key in self.data:
            if key not in self.required and key not in self.optional:
                logging.warning("%s: unknown key %r", self.source, key)
        self.data = {**self.required, **self.optional, **defaults, **self.data}

    @classmethod
    def empty(cls: Type[T]) -> T:
        return cls(None, {})

    @classmethod
    def load(cls: Type[T], path: Path) -> T:
        logging.info("loading configuration from %s", path)
        with open(path) as f:
            return cls.load_from(path, f)

    @classmethod
    def loads(cls: Type[T], path: Optional[Path], content: str) -> T:
        """Read settings from a string; path only labels log messages."""
        return cls.load_from(path, StringIO(content))

    @classmethod
    def load_from(cls: Type[T], path: Optional[Path], content: TextIO) -> T:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as ex:
            logging.error("cannot parse %s: %s", path, ex)
            data = {}
        # An empty file loads as None.
        if data is None:
            data = {}
        if not isinstance(data, dict):
            logging.error("invalid YAML in %s: %s", path, type(data))
            data = {}
        return cls(path, data)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def get(self, key: str) -> Optional[Any]:
        """Return a setting, or None if it is not set."""
        return self.data.get(key)
