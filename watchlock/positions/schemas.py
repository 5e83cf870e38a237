"""Pydantic schemas for untrusted position payloads.

Request bodies and live-feed shaped metadata arrive as camelCase JSON
(``yardLine``). They are parsed here, converted to the codec dataclasses,
and run through the sport's validator before anything is encoded.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union, assert_never

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ..logging import logger
from .codec import validate_position
from .types import (
    BaseballPhase,
    BaseballPosition,
    FootballPhase,
    FootballPosition,
    Half,
    InvalidPositionError,
    Position,
    Possession,
)


class BaseballPositionPayload(BaseModel):
    """MLB position metadata with camelCase input/output."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    sport: Literal["mlb"] = "mlb"
    inning: int
    half: Half
    outs: Union[Literal[0, 1, 2], Literal["END"]]
    phase: BaseballPhase = BaseballPhase.IN_GAME
    batter: str | None = Field(None, max_length=80)

    def to_position(self) -> BaseballPosition:
        batter = self.batter.strip() if self.batter else ""
        return BaseballPosition(
            inning=self.inning,
            half=self.half,
            outs=self.outs,
            phase=self.phase,
            batter=batter or None,
        )


class FootballPositionPayload(BaseModel):
    """NFL position metadata with camelCase input/output."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    sport: Literal["nfl"] = "nfl"
    quarter: int
    time: str
    possession: Possession | None = None
    down: Union[Literal[1, 2, 3, 4], Literal["END"], None] = None
    distance: int | None = None
    yard_line: int | None = Field(None, alias="yardLine")
    phase: FootballPhase | None = None

    def to_position(self) -> FootballPosition:
        return FootballPosition(
            quarter=self.quarter,
            time=self.time.strip(),
            possession=self.possession,
            down=self.down,
            distance=self.distance,
            yard_line=self.yard_line,
            phase=self.phase,
        )


PositionPayload = Annotated[
    Union[BaseballPositionPayload, FootballPositionPayload],
    Field(discriminator="sport"),
]

_payload_adapter: TypeAdapter[BaseballPositionPayload | FootballPositionPayload] = TypeAdapter(
    PositionPayload
)


def parse_position(payload: Mapping[str, Any]) -> Position:
    """Parse and validate an untrusted position payload.

    Raises:
        InvalidPositionError: If the payload is malformed or the position
            fails its sport's validation rules.
    """
    sport = payload.get("sport") if isinstance(payload, Mapping) else None
    try:
        parsed = _payload_adapter.validate_python(payload)
    except ValidationError as exc:
        first = exc.errors()[0]
        loc = ".".join(str(part) for part in first["loc"]) or "payload"
        logger.info("position_payload_rejected", sport=sport, field=loc, error=first["msg"])
        raise InvalidPositionError(sport, f"{loc}: {first['msg']}") from exc

    position = parsed.to_position()
    try:
        return validate_position(position)
    except InvalidPositionError as exc:
        logger.info("position_payload_rejected", sport=sport, error=exc.reason)
        raise


def dump_position(position: Position) -> dict[str, Any]:
    """Serialize a position to the camelCase metadata stored next to its integer."""
    if isinstance(position, BaseballPosition):
        model: BaseModel = BaseballPositionPayload(
            inning=position.inning,
            half=position.half,
            outs=position.outs,
            phase=position.phase,
            batter=position.batter,
        )
    elif isinstance(position, FootballPosition):
        model = FootballPositionPayload(
            quarter=position.quarter,
            time=position.time,
            possession=position.possession,
            down=position.down,
            distance=position.distance,
            yard_line=position.yard_line,
            phase=position.phase,
        )
    else:
        assert_never(position)
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)
