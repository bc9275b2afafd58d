"""Built-in documentation categories and the process-wide manifest."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .manifest import CategoryManifest
from .models import Category

# Declaration order is navigation order.
_DECLARED: dict[str, dict[str, object]] = {
    "Backend Intro": {
        "path": "BackendIntro",
        "files": (
            "Backend.md",
            "BackendRoadmap.md",
            "CORS.md",
            "fsModule.md",
            "REST_API.md",
        ),
    },
    "Auth & OAuth": {
        "path": "AuthAndOAuth",
        "files": (
            "MailSending.md",
            "OAuthAndProfessionalMailSending.md",
        ),
    },
    "Caching Using Redis": {
        "path": "CachingUsingRedis",
        "files": ("Redis.md",),
    },
    "Data Modelling": {
        "path": "DataModelling",
        "files": ("DataModelling.md",),
    },
    "Data Streaming": {
        "path": "DataStreaming",
        "files": ("Stream.md",),
    },
    "Location Module": {
        "path": "LocationModule",
        "files": ("LocationTracking.md",),
    },
    "Mega Project (YouTube)": {
        "path": "MegaProjectYoutube",
        "files": (
            "MegaprojectNotesOne.md",
            "MegaProjectTwo.md",
        ),
    },
    "Payment Integration": {
        "path": "PaymentIntegration",
        "files": ("PaymentIntegration.md",),
    },
    "Task Scheduling": {
        "path": "TaskScheduling",
        "files": ("TaskScheduling.md",),
    },
    "Validations (Zod & Joi)": {
        "path": "ValidationsUsingZodAndJoi",
        "files": ("ValidationsUsingValidators.md",),
    },
    "WebSockets": {
        "path": "WebSockets",
        "files": ("SocketIO.md",),
    },
}

FILES_BY_CATEGORY: Mapping[str, Mapping[str, object]] = MappingProxyType(
    {name: MappingProxyType(entry) for name, entry in _DECLARED.items()}
)

MANIFEST: CategoryManifest = CategoryManifest.from_mapping(FILES_BY_CATEGORY)


def get(display_name: str) -> Optional[Category]:
    """Return the built-in category for ``display_name`` or None."""
    return MANIFEST.get(display_name)


def list_categories() -> Tuple[Tuple[str, Category], ...]:
    return MANIFEST.list()


def resolve_path(display_name: str, filename: str) -> Optional[str]:
    return MANIFEST.resolve_path(display_name, filename)


__all__ = ["FILES_BY_CATEGORY", "MANIFEST", "get", "list_categories", "resolve_path"]
