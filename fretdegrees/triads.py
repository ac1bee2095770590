"""Diatonic triads of the major scale and chord-tone roles.

The catalog lists the seven diatonic triads by degree, preceded by a
"no selection" entry whose degree list is empty.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from typing import Dict, List, Optional, Sequence, Tuple

from fretdegrees import constants


@unique
class Role(Enum):
    """The function of a note within the selected triad.

    Values are the note's position in the triad's degree list.
    """

    Root = 0
    Third = 1
    Fifth = 2

    @property
    def is_root(self) -> bool:
        return self == Role.Root


ROLE_LOOKUP: Dict[int, Role] = {r.value: r for r in Role}
"""Lookup from degree-list position to role."""


@dataclass(frozen=True)
class Triad:
    """A named triad built on one degree of the major scale."""

    value: str
    """Identifier used on the command line, e.g. ``"V"``."""
    label: str
    """Text shown in the dropdown."""
    degrees: Tuple[int, ...]
    """Root, third and fifth degrees, or empty for no selection."""

    def __post_init__(self) -> None:
        if not self.degrees:
            return
        if len(self.degrees) != len(Role):
            raise ValueError(f"Triad {self.value!r} needs 3 degrees: {self.degrees}")
        if len(set(self.degrees)) != len(self.degrees):
            raise ValueError(f"Triad {self.value!r} repeats a degree: {self.degrees}")
        for degree in self.degrees:
            if degree < 1 or degree > constants.NUM_DEGREES:
                raise ValueError(f"Triad {self.value!r} has bad degree: {degree}")

    @property
    def empty(self) -> bool:
        """True for the "no selection" entry."""
        return not self.degrees


NO_TRIAD = Triad("", "Select a triad", ())
"""The "no selection" entry; highlights nothing."""

TRIADS: List[Triad] = [
    NO_TRIAD,
    Triad("I", "I (Major)", (1, 3, 5)),
    Triad("ii", "ii (minor)", (2, 4, 6)),
    Triad("iii", "iii (minor)", (3, 5, 7)),
    Triad("IV", "IV (Major)", (4, 6, 1)),
    Triad("V", "V (Major)", (5, 7, 2)),
    Triad("vi", "vi (minor)", (6, 1, 3)),
    Triad("vii", "vii° (diminished)", (7, 2, 4)),
]
"""Every selectable triad, in dropdown order."""


def _build_lookup(key: str) -> Dict[str, Triad]:
    d: Dict[str, Triad] = {}
    for triad in TRIADS:
        k = getattr(triad, key)
        assert k not in d
        d[k] = triad
    return d


TRIAD_LOOKUP: Dict[str, Triad] = _build_lookup("value")
"""Lookup from triad identifier to triad."""

LABEL_LOOKUP: Dict[str, Triad] = _build_lookup("label")
"""Lookup from dropdown label to triad."""


def triad_for_value(value: str) -> Triad:
    """Resolve a triad identifier, falling back to no selection."""
    return TRIAD_LOOKUP.get(value, NO_TRIAD)


def triad_for_label(label: str) -> Triad:
    """Resolve a dropdown label, falling back to no selection."""
    return LABEL_LOOKUP.get(label, NO_TRIAD)


def role_of(degree: int, triad_degrees: Sequence[int]) -> Optional[Role]:
    """Find the role a degree plays in a triad.

    Args:
        degree: A scale degree (1-7).
        triad_degrees: The selected triad's degrees (root, third, fifth),
            or an empty sequence when nothing is selected.

    Returns:
        The degree's role, or None if nothing is selected or the degree
        is not a chord tone.
    """
    for index, member in enumerate(triad_degrees):
        if member == degree:
            return ROLE_LOOKUP.get(index)
    return None
