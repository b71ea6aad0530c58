from app.database.json_store import RecordStore
from app.core.exceptions import NotFoundError
from app.modules.peers.matcher import find_matches
from app.modules.peers.schemas import MatchFilter, MatchedPeerResponse, WaveCreate, WaveResponse
from app.modules.users.models import User, Wave
from app.modules.users.schemas import UserResponse
from typing import List
import logging

logger = logging.getLogger(__name__)


class PeerService:
    def __init__(self, store: RecordStore):
        self.store = store

    def list_peers(self) -> List[UserResponse]:
        """Every user, without credentials"""
        return [UserResponse.model_validate(user) for user in self.store.users]

    def find_matches(self, requester: User, match_filter: MatchFilter) -> List[MatchedPeerResponse]:
        """Filter and rank peers for the requester"""
        ranked = find_matches(requester, self.store.users.all(), match_filter)
        logger.debug(f"{len(ranked)} peers matched for {requester.id}")
        return [
            MatchedPeerResponse(
                **UserResponse.model_validate(r.peer).model_dump(),
                distance_km=round(r.distance_km, 2),
                match_score=r.match_score,
                common_interests=r.common_interests
            )
            for r in ranked
        ]

    def send_wave(self, sender: User, wave_data: WaveCreate) -> WaveResponse:
        """Append a wave to the target user's inbox"""
        with self.store.transaction(self.store.users):
            recipient = self.store.users.get(wave_data.to_peer_id)
            if recipient is None:
                raise NotFoundError("Peer not found")
            wave = Wave(from_user_id=sender.id, from_name=sender.name, message=wave_data.message)
            recipient.waves.append(wave)
        logger.info(f"Wave {wave.id} sent from {sender.id} to {recipient.id}")
        return WaveResponse.model_validate(wave)

    def list_waves(self, user: User) -> List[WaveResponse]:
        return [WaveResponse.model_validate(w) for w in user.waves]

    def mark_wave_read(self, user: User, wave_id: str) -> WaveResponse:
        with self.store.transaction(self.store.users):
            wave = next((w for w in user.waves if w.id == wave_id), None)
            if wave is None:
                raise NotFoundError("Wave not found")
            wave.read = True
        return WaveResponse.model_validate(wave)
