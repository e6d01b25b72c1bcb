"""Display names for heroes and minotaurs."""

from __future__ import annotations

from labyrinth.util import rng

_minotaur_rng = rng.get("names.minotaur")
_player_rng = rng.get("names.player")

MINOTAUR_NAMES: tuple[str, ...] = (
    "Ἀστερίων",
    "Μίνως",
    "Σαρπηδών",
    "Ῥαδάμανθυς",
    "Ἀμφιτρύων",
    "Πτερέλαος",
    "Τάφος",
)

# Characters of the requested name kept before the numeric suffix.
PLAYER_NAME_LENGTH = 8


def random_minotaur_name() -> str:
    return _minotaur_rng.choice(MINOTAUR_NAMES)


def to_player_name(name: str) -> str:
    """Truncate ``name`` and add a random suffix, e.g. ``"Theseus#042"``."""
    return f"{name[:PLAYER_NAME_LENGTH]}#{_player_rng.randrange(1000):03}"
