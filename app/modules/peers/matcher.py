"""
Peer filtering and match scoring.

filter_peers applies the hard constraints of a MatchFilter; rank_peers scores
the survivors against the requester and orders them best first.
"""

import math
from typing import Iterable, List, NamedTuple

from app.core.exceptions import LocationRequiredError
from app.modules.peers.geo import haversine_km
from app.modules.peers.schemas import MatchFilter
from app.modules.users.models import User

INTEREST_WEIGHT = 3
AGE_WINDOW_YEARS = 10
DISTANCE_WINDOW_KM = 10
DISTANCE_WEIGHT = 2


class Candidate(NamedTuple):
    peer: User
    distance_km: float


class RankedPeer(NamedTuple):
    peer: User
    distance_km: float
    score: float
    match_score: int
    common_interests: List[str]


def distance_between(a: User, b: User) -> float:
    return haversine_km(a.location.lat, a.location.lng, b.location.lat, b.location.lng)


def shared_interests(requester: User, peer: User) -> List[str]:
    theirs = set(peer.interests)
    return [interest for interest in requester.interests if interest in theirs]


def filter_peers(requester: User, candidates: Iterable[User], match_filter: MatchFilter) -> List[Candidate]:
    """Return candidates passing every constraint, in discovery order."""
    if not requester.has_location:
        raise LocationRequiredError()

    wanted = set(match_filter.interests)
    matches = []
    for peer in candidates:
        if peer.id == requester.id:
            continue
        if not peer.has_location:
            continue
        if peer.age is not None and not (match_filter.min_age <= peer.age <= match_filter.max_age):
            continue
        distance = distance_between(requester, peer)
        # NaN never passes
        if not distance <= match_filter.distance_km:
            continue
        if wanted and wanted.isdisjoint(peer.interests):
            continue
        matches.append(Candidate(peer, distance))
    return matches


def score_peer(requester: User, peer: User, distance_km: float) -> float:
    score = INTEREST_WEIGHT * len(shared_interests(requester, peer))
    if requester.age is not None and peer.age is not None:
        score += max(0, AGE_WINDOW_YEARS - abs(requester.age - peer.age))
    score += max(0.0, (DISTANCE_WINDOW_KM - distance_km) * DISTANCE_WEIGHT)
    return score


def display_score(score: float) -> int:
    """Round half up to the integer shown to clients."""
    return int(math.floor(score + 0.5))


def rank_peers(requester: User, candidates: Iterable[Candidate]) -> List[RankedPeer]:
    """Score candidates and sort best first; equal scores keep their input order."""
    ranked = []
    for peer, distance in candidates:
        score = score_peer(requester, peer, distance)
        ranked.append(RankedPeer(
            peer=peer,
            distance_km=distance,
            score=score,
            match_score=display_score(score),
            common_interests=shared_interests(requester, peer),
        ))
    return sorted(ranked, key=lambda r: r.match_score, reverse=True)


def find_matches(requester: User, users: Iterable[User], match_filter: MatchFilter) -> List[RankedPeer]:
    return rank_peers(requester, filter_peers(requester, users, match_filter))
