"""Loading and releasing the gate images."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Optional, Union

import pygame

from gatesim.constants import GATE_DATA, GateType

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_PATHS: tuple[str, ...] = (
    "",
    "resources/",
    "../resources/",
    "../../resources/",
    "./resources/",
)


def load_gate_textures(
    search_paths: Optional[Iterable[Union[str, os.PathLike]]] = None,
) -> dict[GateType, Path]:
    """Load each gate's image from the first search path holding it.

    Returns the path each loaded image was read from, keyed by gate type.
    """
    bases = list(DEFAULT_SEARCH_PATHS if search_paths is None else search_paths)
    logger.debug("Current working directory: %s", Path.cwd())

    loaded: dict[GateType, Path] = {}
    for gate_type, info in GATE_DATA.items():
        if info.image_path is None:
            logger.debug("No image path for %s (expected for INPUT/OUTPUT)", info.label)
            continue

        filename = Path(info.image_path).name
        for base in bases:
            candidate = Path(base) / filename
            if not candidate.is_file():
                logger.debug("Tried path: %s (file not found)", candidate)
                continue
            try:
                image = pygame.image.load(str(candidate))
            except pygame.error as exc:
                logger.warning("Found but failed to load %s: %s", candidate, exc)
                continue
            info.texture = image
            loaded[gate_type] = candidate
            width, height = image.get_size()
            logger.info("Loaded %s texture from %s (%dx%d)", info.label, candidate, width, height)
            break
        else:
            logger.error("Could not load texture for %s", info.label)

    if not loaded:
        logger.warning(
            "No textures were loaded; check that the PNG images exist in a "
            "'resources' directory and are readable"
        )
    return loaded


def unload_gate_textures() -> list[GateType]:
    """Release every loaded gate image and return the types that had one."""
    released = []
    for gate_type, info in GATE_DATA.items():
        if info.texture is not None:
            logger.info("Unloading texture: %s", info.label)
            info.texture = None
            released.append(gate_type)
    return released