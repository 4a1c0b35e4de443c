"""Domain model for colony-simulation save files.

The package exposes:

* Frozen dataclasses describing factions, pawns and names (see :mod:`models`).
* Enumerations shared by the model (see :mod:`enums`).
* The document layout the parsers read (see :mod:`save_format`).
* One parser per entity and the :func:`game.build_game` entry point.
"""

from . import enums, errors, factions, fields, game, models, names, pawns, save_format

__all__ = [
    "enums",
    "errors",
    "factions",
    "fields",
    "game",
    "models",
    "names",
    "pawns",
    "save_format",
]
