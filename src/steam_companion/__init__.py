"""
steam-companion — background agent for the Steam inventory browser extension.

Fetches the logged-in user's inventory, keeps the content script injected
where it is needed and registered where the user granted access.
"""

from steam_companion.agent import BackgroundAgent
from steam_companion.dispatcher import CommandDispatcher
from steam_companion.errors import (
    CompanionError,
    IdentityError,
    InjectionError,
    PermissionValidationError,
    RemoteFetchError,
    TransportError,
)
from steam_companion.host import BrowserHost
from steam_companion.identity import IdentityResolver
from steam_companion.inventory import InventoryFetcher
from steam_companion.models.events import ContentScriptEvent, InboundEvent
from steam_companion.permissions import PermissionSyncEngine
from steam_companion.readiness import HandshakeState, ReadinessHandshake

__version__ = "0.1.0"
__all__ = [
    "BackgroundAgent",
    "BrowserHost",
    "CommandDispatcher",
    "IdentityResolver",
    "InventoryFetcher",
    "ReadinessHandshake",
    "HandshakeState",
    "PermissionSyncEngine",
    "CompanionError",
    "TransportError",
    "RemoteFetchError",
    "IdentityError",
    "InjectionError",
    "PermissionValidationError",
    "InboundEvent",
    "ContentScriptEvent",
]
