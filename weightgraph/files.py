"""Locating and creating the configuration file."""

import logging
import os.path
from pathlib import Path
from typing import Optional

from weightgraph import defaults
from weightgraph.logs import fatal


def create_config(path: Optional[Path] = None) -> Path:
    """Write the default configuration file and return its path.

    Writes weightgraph.yml in the working directory unless path is given.
    Exits with a fatal log if the file already exists.
    """
    if path is None:
        path = Path(defaults.CONFIG_FILENAME)
    try:
        with open(path, "x") as f:
            f.write(defaults.config_yml)
    except FileExistsError as ex:
        fatal("%s already exists", ex.filename)
    return path


def find_config(explicit: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to use.

    An explicit path must exist (otherwise this logs an error and returns
    None). Without one, searches the working directory and its parents for
    weightgraph.yml, returning None if there is none.
    """
    if explicit is not None:
        if not explicit.is_file():
            logging.error("config file %s not found", explicit)
            return None
        return explicit
    path = Path.cwd()
    while True:
        config = path / defaults.CONFIG_FILENAME
        if config.is_file():
            # os.path.relpath rather than Path.relative_to since the latter
            # cannot go up directories with "..".
            return Path(os.path.relpath(config, Path.cwd()))
        if path == path.parent:
            return None
        path = path.parent
