"""Core module exports."""
from placement_portal.core.config import settings, get_settings, Settings
from placement_portal.core.storage import (
    KeyValueStorage,
    MemoryStorage,
    FileStorage,
    RedisStorage,
    build_storage,
)
from placement_portal.core.store import COLLECTIONS, Collection, PortalStore
from placement_portal.core.fixtures import FixtureLoader
from placement_portal.core.latency import Latency
from placement_portal.core.exceptions import (
    APIException,
    NotFoundException,
    ConflictException,
    ValidationException,
    FixtureLoadError,
    JobNotFoundException,
    ApplicationNotFoundException,
    CompanyNotFoundException,
    UserNotFoundException,
    MentorshipNotFoundException,
    ReferralNotFoundException,
    DuplicateApplicationException,
    ReferralClosedException,
    EmailAlreadyExistsException,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    "Settings",
    # Storage
    "KeyValueStorage",
    "MemoryStorage",
    "FileStorage",
    "RedisStorage",
    "build_storage",
    # Store
    "COLLECTIONS",
    "Collection",
    "PortalStore",
    "FixtureLoader",
    "Latency",
    # Exceptions
    "APIException",
    "NotFoundException",
    "ConflictException",
    "ValidationException",
    "FixtureLoadError",
    "JobNotFoundException",
    "ApplicationNotFoundException",
    "CompanyNotFoundException",
    "UserNotFoundException",
    "MentorshipNotFoundException",
    "ReferralNotFoundException",
    "DuplicateApplicationException",
    "ReferralClosedException",
    "EmailAlreadyExistsException",
]
