"""
Proximity filtering for contractor search.

A contractor is in range of a house when the distance is within both the
searcher's maximum distance and the contractor's own service radius. All
distances are in miles.
"""

import logging
from typing import Iterable, List

from .distance import calculate_distance
from .models import ProximityCandidate, ProximityMatch

logger = logging.getLogger(__name__)


def filter_by_distance(
    origin_lat: float,
    origin_lon: float,
    candidates: Iterable[ProximityCandidate],
    max_distance: float,
) -> List[ProximityMatch]:
    """
    Keep candidates within range of the origin.

    Candidates without coordinates can't be ruled out, so they are kept with
    an unknown distance. Input order is preserved.
    """
    matches = []
    total = 0

    for candidate in candidates:
        total += 1
        if candidate.latitude is None or candidate.longitude is None:
            logger.debug(f"Candidate {candidate.id} has no coordinates, including anyway")
            matches.append(ProximityMatch(id=candidate.id, distance=None))
            continue

        distance = calculate_distance(origin_lat, origin_lon, candidate.latitude, candidate.longitude)
        effective_radius = min(max_distance, candidate.service_radius)
        if distance <= effective_radius:
            matches.append(ProximityMatch(id=candidate.id, distance=distance))

    logger.info(f"Distance filter kept {len(matches)} of {total} candidates within {max_distance} miles")
    return matches


def sort_by_distance(matches: List[ProximityMatch]) -> List[ProximityMatch]:
    """Nearest first; unknown distances last"""
    return sorted(matches, key=lambda m: m.distance if m.distance is not None else float("inf"))
