"""Ranking of candidate names against a failed lookup."""

import logging
from collections.abc import Iterable

from .consts import INTERNAL_NAMES
from .distance import levenshtein
from .models import ScoredCandidate, TieBreak

logger = logging.getLogger("didyoumean.ranking")


def score(
    failed_name: str,
    candidates: Iterable[str],
    *,
    excluded_names: Iterable[str] = INTERNAL_NAMES,
) -> list[ScoredCandidate]:
    """Score every eligible candidate against ``failed_name``.

    The failed name itself, excluded names and repeated spellings are skipped.

    Returns:
        Scored candidates by non-decreasing distance, discovery order within
        a distance.
    """
    excluded = set(excluded_names)
    excluded.add(failed_name)

    scored = []
    seen: set[str] = set()
    for candidate in candidates:
        if candidate in excluded or candidate in seen:
            continue
        seen.add(candidate)
        scored.append(
            ScoredCandidate(name=candidate, distance=levenshtein(failed_name, candidate))
        )

    # sorted() is stable, discovery order survives inside a distance
    return sorted(scored, key=lambda s: s.distance)


def rank(
    failed_name: str,
    candidates: Iterable[str],
    *,
    tie_break: TieBreak = TieBreak.DISCOVERY,
    excluded_names: Iterable[str] = INTERNAL_NAMES,
) -> list[str]:
    """Return the candidates nearest to ``failed_name``.

    Only the single best-distance tier is returned; a tie yields several
    names, ordered by ``tie_break``.

    Args:
        failed_name: The name that did not resolve.
        candidates: Names that do resolve, in discovery order.
        tie_break: DISCOVERY keeps the candidates' order, LEXICAL sorts them.
        excluded_names: Plumbing names that must never be suggested.

    Returns:
        Nearest names, best first. Empty when no eligible candidate exists.
    """
    scored = score(failed_name, candidates, excluded_names=excluded_names)
    if not scored:
        logger.debug(f"No candidates to rank for '{failed_name}'")
        return []

    d_min = scored[0].distance
    nearest = [s.name for s in scored if s.distance == d_min]
    if tie_break == TieBreak.LEXICAL:
        nearest.sort()

    logger.debug(
        f"Ranked {len(scored)} candidates for '{failed_name}': "
        f"{len(nearest)} at distance {d_min}"
    )
    return nearest
