"""
Configuration and file reading utilities.

This module provides utilities for reading the JSON configuration files
bundled with the package (message templates and aliases). All functions
include caching so that the same file is read from disk only once.

Methods
-------
read_config
    Read and cache JSON configuration files from the package's config directory.

Examples
--------
>>> from factorica._utils import read_config

>>> read_config("messages")["errors"]["no_numeric_levels"]
'no level is numeric: at least one existing level must be coercible to a number.'
"""

import json
import pathlib
from functools import lru_cache


@lru_cache(maxsize=2)
def read_config(name) -> dict:
    """
    Read and cache JSON configuration files.

    Parameters
    ----------
    name : str
        The name of the configuration file (without .json extension).
        File is located at `config/{name}.json` relative to the package root.

    Returns
    -------
    dict
        The parsed JSON content of the configuration file.

    Raises
    ------
    FileNotFoundError
        If the requested configuration file does not exist.

    Notes
    -----
    - The cache size is set to 2 because factorica ships 2 configuration
      files (``messages`` and ``aliases``).
    """
    path = pathlib.Path(__file__).resolve().parent.parent / f"config/{name}.json"
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
