"""Domain models (Pydantic v2).

A resolved address is the only value the core hands back to callers. The
model describes *what* an address is, not *how* it was obtained (DNS or an
executable).
"""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ResolvedAddress(BaseModel):
    """An IPv4/IPv6 address plus an optional zone (IPv6 scope id).

    Rules:
    - `address` is parsed from its textual form; invalid literals are rejected.
    - `zone` is kept as printed; it is only meaningful for IPv6 link-local
      addresses but is not rejected elsewhere.
    """

    model_config = ConfigDict(frozen=True)

    address: IPv4Address | IPv6Address = Field(
        ...,
        description="IP literal (v4 or v6) without any zone suffix.",
    )
    zone: str | None = Field(
        default=None,
        min_length=1,
        description="Zone index or interface name (the part after '%').",
    )

    @property
    def version(self) -> int:
        return self.address.version

    def __str__(self) -> str:
        if self.zone:
            return f"{self.address}%{self.zone}"
        return str(self.address)
