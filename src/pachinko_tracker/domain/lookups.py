"""Domain models for employee and machine lookup tables."""

from dataclasses import dataclass

UNKNOWN_NAME = "unknown"


@dataclass(frozen=True)
class LookupEntry:
    """An id and display name pair."""

    id: str
    name: str


DEFAULT_EMPLOYEES = (
    LookupEntry(id="1", name="Taro Tanaka"),
    LookupEntry(id="2", name="Jiro Sato"),
    LookupEntry(id="3", name="Saburo Suzuki"),
    LookupEntry(id="4", name="Shiro Takahashi"),
    LookupEntry(id="5", name="Goro Ito"),
)

DEFAULT_MACHINES = (
    LookupEntry(id="1", name="Hokuto no Ken"),
    LookupEntry(id="2", name="Basilisk"),
    LookupEntry(id="3", name="My Juggler"),
    LookupEntry(id="4", name="I'm Juggler"),
    LookupEntry(id="5", name="Hana-Hana"),
    LookupEntry(id="6", name="Yoshimune"),
    LookupEntry(id="7", name="Monster Hunter"),
    LookupEntry(id="8", name="God Eater"),
)
