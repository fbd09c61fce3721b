"""
League API Client.

Async client for the game-data REST API. Every endpoint method builds its
URL from a scope and path, performs one request and returns the parsed JSON
body, raising an API exception when the server reports an error.
"""

import json
from typing import TYPE_CHECKING, Optional, Any, Union, Iterable

import httpx

from league_core.api.keys import ApiKey, KeyStore
from league_core.api.models import (
    RequestBody,
    TournamentCodeParameters,
    TournamentCodeUpdateParameters,
    ProviderRegistrationParameters,
    TournamentRegistrationParameters,
    dump_body,
)
from league_core.api.request import (
    API_HOST,
    STATUS_HOST,
    GLOBAL_SCOPE,
    build_status_url,
    build_url,
    encode_properties,
    encode_value,
    platform_region,
)
from league_core.api.response import normalize_response
from league_core.utils.helpers import join_ids, redact_api_key
from league_core.utils.logging import get_logger

if TYPE_CHECKING:
    from league_core.config.models import ClientConfig

logger = get_logger(__name__)

Ids = Union[str, int, Iterable[Union[str, int]]]


class LeagueAPI:
    """
    Async API client for the game-data API.

    Provides methods for:
    - Champions, champion mastery and static data
    - Current and featured games, recent games, matches
    - Leagues, stats, summoners and teams
    - Shard status
    - Tournament provider operations (requires a tournaments key)
    """

    JSON_CONTENT_TYPE = "application/json; charset=UTF-8"

    def __init__(
        self,
        key: Union[str, ApiKey, KeyStore],
        api_host: str = API_HOST,
        status_host: str = STATUS_HOST,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the API client.

        Args:
            key: The API key's value, an ApiKey, or a complete KeyStore
            api_host: Domain the region scope is prefixed to
            status_host: Host serving the shard status endpoints
            timeout: Request timeout in seconds, None for no timeout
        """
        if isinstance(key, KeyStore):
            self._keys = key
        elif isinstance(key, ApiKey):
            self._keys = KeyStore(key=key)
        elif isinstance(key, str):
            self._keys = KeyStore(key=ApiKey(value=key, tournaments=False))
        else:
            raise TypeError("key must be either a string, an ApiKey or a KeyStore.")

        self.api_host = api_host
        self.status_host = status_host
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_config(cls, config: "ClientConfig") -> "LeagueAPI":
        """
        Create a client from a ClientConfig.

        Args:
            config: Loaded league_core.config.ClientConfig

        Returns:
            Configured client
        """
        from league_core.config.loader import build_key_store

        return cls(
            build_key_store(config),
            api_host=config.api_host,
            status_host=config.status_host,
            timeout=config.timeout,
        )

    @property
    def keys(self) -> KeyStore:
        """Keys currently used to sign requests."""
        return self._keys

    def add_tournaments_key(self, key: Union[str, ApiKey]) -> None:
        """
        Add an API key that has access to the tournaments endpoints.

        This key is used only for requests made to the tournament provider
        endpoints; the general key is left unchanged.

        Args:
            key: The API key's value, or ApiKey
        """
        if isinstance(key, str):
            key = ApiKey(value=key, tournaments=True)
        elif not isinstance(key, ApiKey):
            raise TypeError("key must be either a string or an ApiKey.")

        if not key.tournaments:
            logger.warning("Tournaments key added without tournaments access flag")
        self._keys = self._keys.with_tournaments_key(key)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "LeagueAPI":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args) -> None:
        """Async context manager exit."""
        await self.close()

    async def _api_call(
        self,
        url: str,
        method: str = "GET",
        content: str = "",
    ) -> tuple[str, httpx.Headers, int]:
        """
        Perform one HTTP request.

        The scheme comes from the URL, so status shard URLs go over plain
        HTTP. Nothing is retried and the body is not interpreted;
        transport failures propagate as httpx.TransportError.

        Args:
            url: Fully qualified URL
            method: HTTP method
            content: JSON request body, empty for none

        Returns:
            (body text, response headers, HTTP status code)
        """
        payload = content.encode("utf-8")
        headers = {
            "Content-Type": self.JSON_CONTENT_TYPE,
            "Content-Length": str(len(payload)),
        }

        client = await self._get_client()
        logger.debug(f"API request: {method} {redact_api_key(url)}")
        response = await client.request(method, url, content=payload, headers=headers)
        return response.text, response.headers, response.status_code

    async def _fetch(
        self,
        url: str,
        method: str = "GET",
        body: Optional[RequestBody] = None,
        allow_empty: bool = False,
    ) -> Any:
        content = json.dumps(dump_body(body)) if body is not None else ""
        text, headers, status_code = await self._api_call(url, method, content)
        return normalize_response(text, headers, status_code, allow_empty=allow_empty)

    async def _request(
        self,
        scope: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        method: str = "GET",
        body: Optional[RequestBody] = None,
        tournaments: bool = False,
        allow_empty: bool = False,
    ) -> Any:
        """Build the URL for a main API endpoint, call it and normalize the result."""
        key = self._keys.select(tournaments)
        url = build_url(scope, path, encode_properties(params), key, host=self.api_host)
        return await self._fetch(url, method, body, allow_empty=allow_empty)

    # =========================================================================
    # Champion Endpoints
    # =========================================================================

    async def get_champions_status(
        self,
        region: str,
        free_to_play: Optional[bool] = None,
    ) -> dict[str, Any]:
        """
        Get the status of all champions.

        Args:
            region: Region code
            free_to_play: Only return free-to-play champions

        Returns:
            ChampionListDto

        Endpoint: GET /api/lol/{region}/v1.2/champion
        """
        return await self._request(
            region,
            f"/api/lol/{region}/v1.2/champion",
            {"freeToPlay": free_to_play},
        )

    async def get_champion_status_by_id(self, region: str, champion_id: int) -> dict[str, Any]:
        """Get the status of one champion. Endpoint: GET /api/lol/{region}/v1.2/champion/{id}"""
        return await self._request(region, f"/api/lol/{region}/v1.2/champion/{champion_id}")

    # =========================================================================
    # Champion Mastery Endpoints
    # =========================================================================

    async def get_champion_mastery(
        self,
        platform_id: str,
        player_id: int,
        champion_id: int,
    ) -> dict[str, Any]:
        """
        Get a player's mastery of one champion.

        Args:
            platform_id: Platform ID (e.g. EUW1), mapped to the host region
            player_id: Summoner ID
            champion_id: Champion ID

        Returns:
            ChampionMasteryDto

        Endpoint: GET /championmastery/location/{platformId}/player/{playerId}/champion/{championId}
        """
        return await self._request(
            platform_region(platform_id),
            f"/championmastery/location/{platform_id}/player/{player_id}/champion/{champion_id}",
        )

    async def get_champions_mastery(self, platform_id: str, player_id: int) -> list[dict[str, Any]]:
        """Get a player's mastery of every champion."""
        return await self._request(
            platform_region(platform_id),
            f"/championmastery/location/{platform_id}/player/{player_id}/champions",
        )

    async def get_score(self, platform_id: str, player_id: int) -> int:
        """Get a player's total champion mastery score."""
        return await self._request(
            platform_region(platform_id),
            f"/championmastery/location/{platform_id}/player/{player_id}/score",
        )

    async def get_top_champions(
        self,
        platform_id: str,
        player_id: int,
        count: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        """
        Get a player's top champions by mastery.

        Args:
            platform_id: Platform ID
            player_id: Summoner ID
            count: Number of entries to return (server default 3)
        """
        return await self._request(
            platform_region(platform_id),
            f"/championmastery/location/{platform_id}/player/{player_id}/topchampions",
            {"count": count},
        )

    # =========================================================================
    # Current / Featured Game Endpoints
    # =========================================================================

    async def get_spectator_game_info_by_summoner_id(
        self,
        platform_id: str,
        summoner_id: int,
    ) -> dict[str, Any]:
        """
        Get the game a summoner is currently playing.

        Endpoint: GET /observer-mode/rest/consumer/getSpectatorGameInfo/{platformId}/{summonerId}
        """
        return await self._request(
            platform_region(platform_id),
            f"/observer-mode/rest/consumer/getSpectatorGameInfo/{platform_id}/{summoner_id}",
        )

    async def get_featured_games(self, region: str) -> dict[str, Any]:
        return await self._request(region, "/observer-mode/rest/featured")

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    async def get_recent_games_by_summoner_id(self, region: str, summoner_id: int) -> dict[str, Any]:
        """Get a summoner's recent games. Endpoint: GET /api/lol/{region}/v1.3/game/by-summoner/{id}/recent"""
        return await self._request(
            region,
            f"/api/lol/{region}/v1.3/game/by-summoner/{summoner_id}/recent",
        )

    # =========================================================================
    # League Endpoints
    # =========================================================================

    async def get_league_by_summoner_ids(self, region: str, summoner_ids: Ids) -> dict[str, list[Any]]:
        """
        Get the leagues of up to 10 summoners, keyed by summoner ID.

        Args:
            region: Region code
            summoner_ids: Comma-separated string or sequence of summoner IDs

        Endpoint: GET /api/lol/{region}/v2.5/league/by-summoner/{summonerIds}
        """
        return await self._request(
            region,
            f"/api/lol/{region}/v2.5/league/by-summoner/{join_ids(summoner_ids)}",
        )

    async def get_league_entry_by_summoner_ids(self, region: str, summoner_ids: Ids) -> dict[str, list[Any]]:
        """Get only the league entries of up to 10 summoners."""
        return await self._request(
            region,
            f"/api/lol/{region}/v2.5/league/by-summoner/{join_ids(summoner_ids)}/entry",
        )

    async def get_league_by_team_ids(self, region: str, team_ids: Ids) -> dict[str, list[Any]]:
        """Get the leagues of up to 10 ranked teams, keyed by team ID."""
        return await self._request(
            region,
            f"/api/lol/{region}/v2.5/league/by-team/{join_ids(team_ids)}",
        )

    async def get_league_entry_by_team_ids(self, region: str, team_ids: Ids) -> dict[str, list[Any]]:
        return await self._request(
            region,
            f"/api/lol/{region}/v2.5/league/by-team/{join_ids(team_ids)}/entry",
        )

    async def get_league_challenger(self, region: str, queue_type: str) -> dict[str, Any]:
        """
        Get the challenger tier league for a queue.

        Args:
            region: Region code
            queue_type: RANKED_SOLO_5x5, RANKED_TEAM_3x3 or RANKED_TEAM_5x5

        Endpoint: GET /api/lol/{region}/v2.5/league/challenger?type={queue_type}
        """
        return await self._request(
            region,
            f"/api/lol/{region}/v2.5/league/challenger",
            {"type": queue_type},
        )

    async def get_league_master(self, region: str, queue_type: str) -> dict[str, Any]:
        """Get the master tier league for a queue."""
        return await self._request(
            region,
            f"/api/lol/{region}/v2.5/league/master",
            {"type": queue_type},
        )

    # =========================================================================
    # Static Data Endpoints (served from the global host)
    # =========================================================================

    async def get_champions(
        self,
        region: str,
        locale: Optional[str] = None,
        version: Optional[str] = None,
        data_by_id: Optional[bool] = None,
        champ_data: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Get static data for all champions.

        Args:
            region: Region whose data to return
            locale: Locale code for localized strings
            version: Data dragon version, latest if omitted
            data_by_id: Key the result by champion ID instead of name
            champ_data: Comma-separated extra fields to include, or "all"

        Returns:
            ChampionListDto

        Endpoint: GET /api/lol/static-data/{region}/v1.2/champion
        """
        return await self._request(
            GLOBAL_SCOPE,
            f"/api/lol/static-data/{region}/v1.2/champion",
            {
                "locale": locale,
                "version": version,
                "dataById": data_by_id,
                "champData": champ_data,
            },
        )

    async def get_champion_by_id(
        self,
        region: str,
        champion_id: int,
        locale: Optional[str] = None,
        version: Optional[str] = None,
        champ_data: Optional[str] = None,
    ) -> dict[str, Any]:
        """Get static data for one champion."""
        return await self._request(
            GLOBAL_SCOPE,
            f"/api/lol/static-data/{region}/v1.2/champion/{champion_id}",
            {"locale": locale, "version": version, "champData": champ_data},
        )

    async def get_items(
        self,
        region: str,
        locale: Optional[str] = None,
        version: Optional[str] = None,
        item_list_data: Optional[str] = None,
    ) -> dict[str, Any]:
        """Get static data for all items."""
        return await self._request(
            GLOBAL_SCOPE,
            f"/api/lol/static-data/{region}/v1.2/item",
            {"locale": locale, "version": version, "itemListData": item_list_data},
        )

    async def get_item_by_id(
        self,
        region: str,
        item_id: int,
        locale: Optional[str] = None,
        version: Optional[str] = None,
        item_data: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._request(
            GLOBAL_SCOPE,
            f"/api/lol/static-data/{region}/v1.2/item/{item_id}",
            {"locale": locale, "version": version, "itemData": item_data},
        )

    async def get_language_strings(
        self,
        region: str,
        locale: Optional[str] = None,
        version: Optional[str] = None,
    ) -> dict[str, Any]:
        """Get localized UI strings."""
        return await self._request(
            GLOBAL_SCOPE,
            f"/api/lol/static-data/{region}/v1.2/language-strings",
            {"locale": locale, "version": version},
        )

    async def get_languages(self, region: str) -> list[str]:
        """Get the locales supported by a region."""
        return await self._request(GLOBAL_SCOPE, f"/api/lol/static-data/{region}/v1.2/languages")

    async def get_maps(
        self,
        region: str,
        locale: Optional[str] = None,
        version: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._request(
            GLOBAL_SCOPE,
            f"/api/lol/static-data/{region}/v1.2/map",
            {"locale": locale, "version": version},
        )

    async def get_masteries(
        self,
        region: str,
        locale: Optional[str] = None,
        version: Optional[str] = None,
        mastery_list_data: Optional[str] = None,
    ) -> dict[str, Any]:
        """Get static data for all masteries."""
        return await self._request(
            GLOBAL_SCOPE,
            f"/api/lol/static-data/{region}/v1.2/mastery",
            {"locale": locale, "version": version, "masteryListData": mastery_list_data},
        )

    async def get_mastery_by_id(
        self,
        region: str,
        mastery_id: int,
        locale: Optional[str] = None,
        version: Optional[str] = None,
        mastery_data: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._request(
            GLOBAL_SCOPE,
            f"/api/lol/static-data/{region}/v1.2/mastery/{mastery_id}",
            {"locale": locale, "version": version, "masteryData": mastery_data},
        )

    async def get_realm(self, region: str) -> dict[str, Any]:
        """Get realm data (CDN paths and current versions)."""
        return await self._request(GLOBAL_SCOPE, f"/api/lol/static-data/{region}/v1.2/realm")

    async def get_runes(
        self,
        region: str,
        locale: Optional[str] = None,
        version: Optional[str] = None,
        rune_list_data: Optional[str] = None,
    ) -> dict[str, Any]:
        """Get static data for all runes."""
        return await self._request(
            GLOBAL_SCOPE,
            f"/api/lol/static-data/{region}/v1.2/rune",
            {"locale": locale, "version": version, "runeListData": rune_list_data},
        )

    async def get_rune_by_id(
        self,
        region: str,
        rune_id: int,
        locale: Optional[str] = None,
        version: Optional[str] = None,
        rune_data: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._request(
            GLOBAL_SCOPE,
            f"/api/lol/static-data/{region}/v1.2/rune/{rune_id}",
            {"locale": locale, "version": version, "runeData": rune_data},
        )

    async def get_summoner_spells(
        self,
        region: str,
        locale: Optional[str] = None,
        version: Optional[str] = None,
        data_by_id: Optional[bool] = None,
        spell_data: Optional[str] = None,
    ) -> dict[str, Any]:
        """Get static data for all summoner spells."""
        return await self._request(
            GLOBAL_SCOPE,
            f"/api/lol/static-data/{region}/v1.2/summoner-spell",
            {
                "locale": locale,
                "version": version,
                "dataById": data_by_id,
                "spellData": spell_data,
            },
        )

    async def get_summoner_spell_by_id(
        self,
        region: str,
        spell_id: int,
        locale: Optional[str] = None,
        version: Optional[str] = None,
        spell_data: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._request(
            GLOBAL_SCOPE,
            f"/api/lol/static-data/{region}/v1.2/summoner-spell/{spell_id}",
            {"locale": locale, "version": version, "spellData": spell_data},
        )

    async def get_versions(self, region: str) -> list[str]:
        """Get the list of data versions, newest first."""
        return await self._request(GLOBAL_SCOPE, f"/api/lol/static-data/{region}/v1.2/versions")

    # =========================================================================
    # Status Endpoints (plain HTTP, unauthenticated)
    # =========================================================================

    async def get_shards(self) -> list[dict[str, Any]]:
        """
        Get the list of shards.

        Endpoint: GET http://status.leagueoflegends.com/shards
        """
        return await self._fetch(build_status_url("/shards", host=self.status_host))

    async def get_shard(self, region: str) -> dict[str, Any]:
        """
        Get the service status of one shard.

        Endpoint: GET http://status.leagueoflegends.com/shards/{region}
        """
        return await self._fetch(build_status_url(f"/shards/{region}", host=self.status_host))

    # =========================================================================
    # Match Endpoints
    # =========================================================================

    async def get_match_ids_by_tournament_code(self, region: str, tournament_code: str) -> list[int]:
        """Get the IDs of the matches played with a tournament code."""
        return await self._request(
            region,
            f"/api/lol/{region}/v2.2/match/by-tournament/{tournament_code}/ids",
        )

    async def get_match_by_id_and_tournament_code(
        self,
        region: str,
        match_id: int,
        tournament_code: str,
        include_timeline: Optional[bool] = None,
    ) -> dict[str, Any]:
        """
        Get a tournament match.

        Args:
            region: Region code
            match_id: Match ID
            tournament_code: Code the match was played with
            include_timeline: Include the event timeline

        Returns:
            MatchDetail

        Endpoint: GET /api/lol/{region}/v2.2/match/for-tournament/{matchId}
        """
        return await self._request(
            region,
            f"/api/lol/{region}/v2.2/match/for-tournament/{match_id}",
            {"tournamentCode": tournament_code, "includeTimeline": include_timeline},
        )

    async def get_match_by_id(
        self,
        region: str,
        match_id: int,
        include_timeline: Optional[bool] = None,
    ) -> dict[str, Any]:
        """Get a match. Endpoint: GET /api/lol/{region}/v2.2/match/{matchId}"""
        return await self._request(
            region,
            f"/api/lol/{region}/v2.2/match/{match_id}",
            {"includeTimeline": include_timeline},
        )

    # =========================================================================
    # Matchlist Endpoints
    # =========================================================================

    async def get_matches_by_summoner_id(
        self,
        region: str,
        summoner_id: int,
        champion_ids: Optional[Ids] = None,
        ranked_queues: Optional[Ids] = None,
        seasons: Optional[Ids] = None,
        begin_time: Optional[int] = None,
        end_time: Optional[int] = None,
        begin_index: Optional[int] = None,
        end_index: Optional[int] = None,
    ) -> dict[str, Any]:
        """
        Get a summoner's match list.

        Args:
            region: Region code
            summoner_id: Summoner ID
            champion_ids: Only matches played with these champions
            ranked_queues: Only matches from these queues
            seasons: Only matches from these seasons
            begin_time: Epoch milliseconds lower bound
            end_time: Epoch milliseconds upper bound
            begin_index: First index of the slice to return
            end_index: Index after the last one to return

        Returns:
            MatchList

        Endpoint: GET /api/lol/{region}/v2.2/matchlist/by-summoner/{summonerId}
        """
        return await self._request(
            region,
            f"/api/lol/{region}/v2.2/matchlist/by-summoner/{summoner_id}",
            {
                "championIds": None if champion_ids is None else join_ids(champion_ids),
                "rankedQueues": None if ranked_queues is None else join_ids(ranked_queues),
                "seasons": None if seasons is None else join_ids(seasons),
                "beginTime": begin_time,
                "endTime": end_time,
                "beginIndex": begin_index,
                "endIndex": end_index,
            },
        )

    # =========================================================================
    # Stats Endpoints
    # =========================================================================

    async def get_ranked_by_summoner_id(
        self,
        region: str,
        summoner_id: int,
        season: Optional[str] = None,
    ) -> dict[str, Any]:
        """Get ranked stats by champion for a summoner."""
        return await self._request(
            region,
            f"/api/lol/{region}/v1.3/stats/by-summoner/{summoner_id}/ranked",
            {"season": season},
        )

    async def get_summary_by_summoner_id(
        self,
        region: str,
        summoner_id: int,
        season: Optional[str] = None,
    ) -> dict[str, Any]:
        """Get stats summaries by queue type for a summoner."""
        return await self._request(
            region,
            f"/api/lol/{region}/v1.3/stats/by-summoner/{summoner_id}/summary",
            {"season": season},
        )

    # =========================================================================
    # Summoner Endpoints
    # =========================================================================

    async def get_summoner_by_names(self, region: str, summoner_names: Ids) -> dict[str, Any]:
        """
        Get summoners by name.

        The result is keyed by each summoner's unique name, see
        league_core.utils.unique_name().

        Args:
            region: Region code
            summoner_names: Comma-separated string or sequence of names

        Endpoint: GET /api/lol/{region}/v1.4/summoner/by-name/{summonerNames}
        """
        names = encode_value(join_ids(summoner_names))
        return await self._request(region, f"/api/lol/{region}/v1.4/summoner/by-name/{names}")

    async def get_summoner_by_ids(self, region: str, summoner_ids: Ids) -> dict[str, Any]:
        """Get summoners by ID, keyed by summoner ID."""
        return await self._request(
            region,
            f"/api/lol/{region}/v1.4/summoner/{join_ids(summoner_ids)}",
        )

    async def get_mastery_pages_by_summoner_ids(self, region: str, summoner_ids: Ids) -> dict[str, Any]:
        return await self._request(
            region,
            f"/api/lol/{region}/v1.4/summoner/{join_ids(summoner_ids)}/masteries",
        )

    async def get_name_by_summoner_ids(self, region: str, summoner_ids: Ids) -> dict[str, str]:
        """Get summoner names keyed by summoner ID."""
        return await self._request(
            region,
            f"/api/lol/{region}/v1.4/summoner/{join_ids(summoner_ids)}/name",
        )

    async def get_rune_pages_by_summoner_ids(self, region: str, summoner_ids: Ids) -> dict[str, Any]:
        return await self._request(
            region,
            f"/api/lol/{region}/v1.4/summoner/{join_ids(summoner_ids)}/runes",
        )

    # =========================================================================
    # Team Endpoints
    # =========================================================================

    async def get_teams_by_summoner_ids(self, region: str, summoner_ids: Ids) -> dict[str, list[Any]]:
        """Get the ranked teams of summoners, keyed by summoner ID."""
        return await self._request(
            region,
            f"/api/lol/{region}/v2.4/team/by-summoner/{join_ids(summoner_ids)}",
        )

    async def get_teams_by_team_ids(self, region: str, team_ids: Ids) -> dict[str, Any]:
        """Get ranked teams keyed by team ID."""
        return await self._request(
            region,
            f"/api/lol/{region}/v2.4/team/{join_ids(team_ids)}",
        )

    # =========================================================================
    # Tournament Provider Endpoints (tournaments key required)
    # =========================================================================

    async def create_tournament_codes(
        self,
        tournament_id: int,
        body: Union[TournamentCodeParameters, dict[str, Any]],
        count: Optional[int] = None,
    ) -> list[str]:
        """
        Create tournament codes for a tournament.

        Args:
            tournament_id: Tournament ID from create_tournament()
            body: Lobby settings for the codes
            count: Number of codes to create (server default 1)

        Returns:
            Generated tournament codes

        Raises:
            MissingTournamentKeyError: If no tournaments key was added

        Endpoint: POST /tournament/public/v1/code
        """
        return await self._request(
            GLOBAL_SCOPE,
            "/tournament/public/v1/code",
            {"tournamentId": tournament_id, "count": count},
            method="POST",
            body=body,
            tournaments=True,
        )

    async def get_tournament_by_code(self, tournament_code: str) -> dict[str, Any]:
        """
        Get the settings of a tournament code.

        Endpoint: GET /tournament/public/v1/code/{tournamentCode}
        """
        return await self._request(
            GLOBAL_SCOPE,
            f"/tournament/public/v1/code/{tournament_code}",
            tournaments=True,
        )

    async def update_tournament_by_code(
        self,
        tournament_code: str,
        body: Union[TournamentCodeUpdateParameters, dict[str, Any]],
    ) -> None:
        """
        Update the lobby settings of a tournament code.

        Endpoint: PUT /tournament/public/v1/code/{tournamentCode}
        """
        await self._request(
            GLOBAL_SCOPE,
            f"/tournament/public/v1/code/{tournament_code}",
            method="PUT",
            body=body,
            tournaments=True,
            allow_empty=True,
        )
        logger.info(f"Updated tournament code {tournament_code}")

    async def get_lobby_events_by_tournament_code(self, tournament_code: str) -> dict[str, Any]:
        """Get the lobby events of a tournament code."""
        return await self._request(
            GLOBAL_SCOPE,
            f"/tournament/public/v1/lobby/events/by-code/{tournament_code}",
            tournaments=True,
        )

    async def create_tournament_provider(
        self,
        body: Union[ProviderRegistrationParameters, dict[str, Any]],
    ) -> int:
        """
        Register a tournament provider.

        Args:
            body: Region and callback URL of the provider

        Returns:
            Provider ID

        Endpoint: POST /tournament/public/v1/provider
        """
        provider_id = await self._request(
            GLOBAL_SCOPE,
            "/tournament/public/v1/provider",
            method="POST",
            body=body,
            tournaments=True,
        )
        logger.info(f"Registered tournament provider {provider_id}")
        return provider_id

    async def create_tournament(
        self,
        body: Union[TournamentRegistrationParameters, dict[str, Any]],
    ) -> int:
        """
        Register a tournament under a provider.

        Returns:
            Tournament ID

        Endpoint: POST /tournament/public/v1/tournament
        """
        tournament_id = await self._request(
            GLOBAL_SCOPE,
            "/tournament/public/v1/tournament",
            method="POST",
            body=body,
            tournaments=True,
        )
        logger.info(f"Registered tournament {tournament_id}")
        return tournament_id
