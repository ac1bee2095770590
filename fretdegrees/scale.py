"""Mapping from fretboard positions to major scale degrees.

A position's pitch class is its semitone offset from the reference pitch.
The seven diatonic pitch classes map to degrees 1-7 and the five chromatic
ones map to no degree.
"""

from typing import Dict, Optional, Tuple

from fretdegrees import constants

MAJOR_INTERVALS: Tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)
"""Semitone offsets of the major scale degrees, in degree order."""


def _build_degree_lookup() -> Tuple[Optional[int], ...]:
    """Build the pitch class to degree table.

    Returns:
        A tuple of 12 entries indexed by semitone, holding the degree (1-7)
        or None for non-diatonic semitones.
    """
    d: Dict[int, int] = {}
    for degree, steps in enumerate(MAJOR_INTERVALS, start=1):
        assert steps not in d
        d[steps] = degree
    assert len(d) == constants.NUM_DEGREES
    table = tuple(d.get(semitone) for semitone in range(constants.MAX_NOTES))
    assert len(table) == constants.MAX_NOTES
    return table


DEGREE_LOOKUP: Tuple[Optional[int], ...] = _build_degree_lookup()
"""Degree (or None) for each semitone 0-11: ``(1, None, 2, None, 3, 4, ...)``."""


def semitone_at(str_index: int, fret: int) -> int:
    """Return the pitch class sounding at a string and fret.

    Args:
        str_index: String index, 0 being the lowest string.
        fret: Fret index, 0 being the open string.

    Returns:
        The semitone offset from the reference pitch, in [0, 12). Python's
        modulo already normalizes negative sums for a positive modulus.
    """
    total = constants.BASE_TUNING + str_index * constants.STRING_INTERVAL + fret
    return total % constants.MAX_NOTES


def degree_at(str_index: int, fret: int) -> Optional[int]:
    """Return the major scale degree sounding at a string and fret.

    Args:
        str_index: String index, 0 being the lowest string.
        fret: Fret index, 0 being the open string.

    Returns:
        The degree (1-7), or None if the pitch class is not in the scale.
    """
    return DEGREE_LOOKUP[semitone_at(str_index, fret)]
