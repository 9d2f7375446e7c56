"""LLDP and CDP neighbor records decoded from NX-OS JSON output.

NX-OS encodes every scalar as a string. Fields typed ``int`` here accept
decimal digit strings only; sentinel text such as ``"not advertised"`` in
those fields is rejected, while string fields keep it verbatim.
"""

from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field

_DIGITS_RE = re.compile(r"[0-9]+")
UINT32_MAX = 2**32 - 1


def _int_from_string(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    elif isinstance(value, str) and _DIGITS_RE.fullmatch(value.strip()):
        number = int(value.strip())
    else:
        raise ValueError(f"expected a decimal integer string, got {value!r}")
    if not 0 <= number <= UINT32_MAX:
        raise ValueError(f"{value!r} is outside the unsigned 32-bit range")
    return number


def _string_list(value: Any) -> Any:
    if isinstance(value, str):
        return [value]
    return value


NumericString = Annotated[int, BeforeValidator(_int_from_string)]


class _Neighbor(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class LLDPNeighbor(_Neighbor):
    """One row of 'show lldp neighbors detail'."""

    remote_device_id_type: str = Field(alias="chassis_type")
    remote_device_id: str = Field(alias="chassis_id")
    remote_device: str = Field(alias="sys_name")
    local_port: str = Field(alias="l_port_id")
    ttl: NumericString
    vlan_id: NumericString
    system_capability: str
    enabled_capability: str
    port_type: str
    remote_port: str = Field(alias="port_id")
    management_address_type: str = Field(alias="mgmt_addr_type")
    management_address: str = Field(alias="mgmt_addr")
    management_address_ipv6_type: str = Field(alias="mgmt_addr_ipv6_type")
    management_address_ipv6: str = Field(alias="mgmt_addr_ipv6")


class LLDPNeighborBrief(_Neighbor):
    """One row of 'show lldp neighbors'."""

    remote_device_id: str = Field(alias="chassis_id")
    local_port: str = Field(alias="l_port_id")
    hold_time: NumericString
    capability: str
    remote_port: str = Field(alias="port_id")


class CDPNeighbor(_Neighbor):
    """One row of 'show cdp neighbors detail'."""

    ifindex: NumericString
    remote_device: str = Field(alias="device_id")
    vtp_name: str = Field(alias="vtpname")
    ip_address: str = Field(alias="v4addr")
    management_address: str = Field(alias="v4mgmtaddr")
    remote_version: str = Field(alias="version")
    cdp_version: str = Field(alias="version_no")
    native_vlan: NumericString = Field(alias="nativevlan")
    duplex_mode: str = Field(alias="duplexmode")
    mtu: NumericString
    platform: str = Field(alias="platform_id")
    remote_port: str = Field(alias="port_id")
    local_port: str = Field(alias="intf_id")
    ttl: NumericString
    capabilities: Annotated[list[str], BeforeValidator(_string_list)] = Field(
        validation_alias=AliasChoices("capability", "capabilities"),
    )
