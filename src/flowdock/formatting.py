"""Display helpers for engine resources."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from flowdock.shared.types import ContainerRecord, ImageRecord

__all__ = ["display_name", "format_size", "image_tag", "short_id"]

_SHORT_ID_LENGTH = 12
_DIGEST_PREFIX = "sha256:"
_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")
_UNTAGGED = "<none>:<none>"
_TWO_PLACES = Decimal("0.01")


def short_id(full_id: str) -> str:
    """Return the 12-character display id, dropping any ``sha256:`` prefix."""
    if full_id.startswith(_DIGEST_PREFIX):
        full_id = full_id[len(_DIGEST_PREFIX) :]
    return full_id[:_SHORT_ID_LENGTH]


def display_name(container: ContainerRecord) -> str:
    """Return the first container name without its leading ``/``."""
    if not container.names:
        return short_id(container.id)
    return container.names[0].lstrip("/")


def image_tag(image: ImageRecord) -> str:
    """Return the first ``repo:tag`` label, or ``<none>:<none>``."""
    return image.repo_tags[0] if image.repo_tags else _UNTAGGED


def format_size(size: float) -> str:
    """Render a byte count like ``1.5 KB`` (at most two decimals, TB cap)."""
    value = float(size)
    order = 0
    while value >= 1024 and order < len(_SIZE_UNITS) - 1:
        order += 1
        value /= 1024
    rounded = Decimal(value).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    rendered = format(rounded, "f").rstrip("0").rstrip(".")
    return f"{rendered} {_SIZE_UNITS[order]}"
