from __future__ import annotations

from typing import NewType, TypeAlias

# =============================================================================
# SPATIAL TYPES
# =============================================================================

TileCoord: TypeAlias = int  # Always integer tile position

# Grid positions - one raster cell of the maze image
Position: TypeAlias = tuple[TileCoord, TileCoord]  # Example: (5, 3) = column 5, row 3

# Grid steps - dx, dy with y growing southward
UnitStep: TypeAlias = int  # One of -1, 0, 1
Offset: TypeAlias = tuple[UnitStep, UnitStep]  # Example: (-1, 0) = westward step

# =============================================================================
# GAME-RELATED TYPES
# =============================================================================

# Difficulty level of a maze. Level 0 is the first maze a party enters, and
# every derived attribute (size, colors, minotaur stats) scales with it.
MazeId = NewType("MazeId", int)

# Seed of a maze or of the session streams. None draws from OS entropy.
RandomSeed: TypeAlias = int | None

# =============================================================================
# RENDERING-RELATED TYPES
# =============================================================================

# 8-bit RGBA color of the raster artifact.
ColorRGBA: TypeAlias = tuple[int, int, int, int]
