"""Request body models for the tournament-provider endpoints."""

from typing import Optional, List, Any, Union
from pydantic import BaseModel, Field


class SummonerIdParams(BaseModel):
    """Summoner IDs allowed to join a tournament code's lobby."""

    participants: List[int] = Field(default_factory=list)


class TournamentCodeParameters(BaseModel):
    """Body of POST /tournament/public/v1/code."""

    model_config = {"populate_by_name": True}

    team_size: int = Field(..., alias="teamSize")
    spectator_type: str = Field(..., alias="spectatorType")  # NONE, LOBBYONLY, ALL
    pick_type: str = Field(..., alias="pickType")  # BLIND_PICK, DRAFT_MODE, ALL_RANDOM, TOURNAMENT_DRAFT
    map_type: str = Field(..., alias="mapType")  # SUMMONERS_RIFT, TWISTED_TREELINE, HOWLING_ABYSS

    allowed_summoner_ids: Optional[SummonerIdParams] = Field(
        default=None, alias="allowedSummonerIds"
    )
    metadata: Optional[str] = None


class TournamentCodeUpdateParameters(BaseModel):
    """Body of PUT /tournament/public/v1/code/{tournamentCode}."""

    model_config = {"populate_by_name": True}

    # Comma-separated summoner IDs
    allowed_participants: Optional[str] = Field(default=None, alias="allowedParticipants")
    spectator_type: Optional[str] = Field(default=None, alias="spectatorType")
    pick_type: Optional[str] = Field(default=None, alias="pickType")
    map_type: Optional[str] = Field(default=None, alias="mapType")


class ProviderRegistrationParameters(BaseModel):
    """Body of POST /tournament/public/v1/provider."""

    region: str
    url: str  # Callback URL for game results


class TournamentRegistrationParameters(BaseModel):
    """Body of POST /tournament/public/v1/tournament."""

    model_config = {"populate_by_name": True}

    provider_id: int = Field(..., alias="providerId")
    name: Optional[str] = None


RequestBody = Union[BaseModel, dict[str, Any]]


def dump_body(body: Optional[RequestBody]) -> Optional[dict[str, Any]]:
    """Serialize a request body model (or plain dict) to wire JSON fields."""
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump(by_alias=True, exclude_none=True)
    return {k: v for k, v in body.items() if v is not None}
