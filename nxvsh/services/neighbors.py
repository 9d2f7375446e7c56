"""LLDP / CDP neighbor discovery.

Each source pairs one show command with the JSON table/row keys it emits
and the record type its rows decode into. Decoding is all-or-nothing: one
malformed row fails the whole table.
"""

from __future__ import annotations

from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from nxvsh.config import Settings, settings
from nxvsh.errors import MalformedPayloadError
from nxvsh.models.commands import CommandResult
from nxvsh.models.neighbors import CDPNeighbor, LLDPNeighbor, LLDPNeighborBrief
from nxvsh.services.vsh import VshExecutor, vsh
from nxvsh.utils.logging import get_logger
from nxvsh.utils.nxos_parser import extract_table_rows

log = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _describe(exc: ValidationError) -> str:
    errors = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "<record>"
        errors.append(f"{loc}: {err['msg']}")
    return "; ".join(errors)


class NeighborSource(Generic[RecordT]):
    """One neighbor table: command, JSON keys and record type."""

    name: ClassVar[str]
    command: ClassVar[str]
    table_key: ClassVar[str]
    row_key: ClassVar[str]
    record: ClassVar[type[BaseModel]]

    def __init__(self, executor: VshExecutor | None = None) -> None:
        self._vsh = executor or vsh

    def decode(self, result: CommandResult) -> list[RecordT]:
        """Decode a command result into records, preserving device order."""
        result.raise_for_status()
        if not result.stdout.strip():
            return []

        rows = extract_table_rows(result.as_json(), self.table_key, self.row_key)
        neighbors: list[RecordT] = []
        for index, row in enumerate(rows):
            try:
                neighbors.append(self.record.model_validate(row))  # type: ignore[arg-type]
            except ValidationError as exc:
                raise MalformedPayloadError(
                    f"{self.row_key}[{index}] is not a valid {self.record.__name__}: "
                    f"{_describe(exc)}",
                ) from exc
        log.debug("neighbors.decoded", source=self.name, count=len(neighbors))
        return neighbors

    def fetch(self) -> list[RecordT]:
        return self.decode(self._vsh.run(self.command))


class LLDPDetailSource(NeighborSource[LLDPNeighbor]):
    name = "lldp-detail"
    command = "show lldp neighbors detail | json"
    table_key = "TABLE_nbor_detail"
    row_key = "ROW_nbor_detail"
    record = LLDPNeighbor


class LLDPSource(NeighborSource[LLDPNeighborBrief]):
    name = "lldp"
    command = "show lldp neighbors | json"
    table_key = "TABLE_nbor"
    row_key = "ROW_nbor"
    record = LLDPNeighborBrief


class CDPSource(NeighborSource[CDPNeighbor]):
    name = "cdp"
    command = "show cdp neighbors detail | json"
    table_key = "TABLE_cdp_neighbor_detail_info"
    row_key = "ROW_cdp_neighbor_detail_info"
    record = CDPNeighbor


NEIGHBOR_SOURCES: dict[str, type[NeighborSource]] = {
    source.name: source for source in (LLDPDetailSource, LLDPSource, CDPSource)
}


# ── public API ────────────────────────────────────────────────────────────

def get_neighbor_source(
    cfg: Settings | None = None,
    *,
    executor: VshExecutor | None = None,
) -> NeighborSource:
    """Build the source selected by ``nxvsh_neighbor_source``."""
    _cfg = cfg or settings
    try:
        source_cls = NEIGHBOR_SOURCES[_cfg.nxvsh_neighbor_source]
    except KeyError:
        raise ValueError(
            f"unknown neighbor source: {_cfg.nxvsh_neighbor_source!r}",
        ) from None
    return source_cls(executor or VshExecutor(_cfg))


def get_lldp_neighbors(executor: VshExecutor | None = None) -> list[LLDPNeighbor]:
    """Return the complete list of LLDP neighbors (detail form)."""
    return LLDPDetailSource(executor).fetch()


def get_cdp_neighbors(executor: VshExecutor | None = None) -> list[CDPNeighbor]:
    return CDPSource(executor).fetch()
