"""Resource listings and candidate listings for mutating commands."""

from __future__ import annotations

import logging
from typing import Callable, List

from flowdock.engine.client import EngineClient
from flowdock.exceptions import EngineCallError
from flowdock.formatting import display_name, format_size, image_tag, short_id
from flowdock.query.factory import SuggestionFactory
from flowdock.shared.suggestion import Suggestion
from flowdock.shared.types import ContainerRecord

__all__ = [
    "containers_for_action",
    "images_for_removal",
    "list_containers",
    "list_images",
]

logger = logging.getLogger(__name__)


def list_containers(engine: EngineClient, factory: SuggestionFactory) -> List[Suggestion]:
    """List every container; selecting one drills into stop or start."""
    try:
        containers = engine.list_containers(all=True)
    except EngineCallError as exc:
        logger.warning("Listing containers failed: %s", exc.message)
        return [factory.error(exc.message, "Failed to retrieve containers")]

    if not containers:
        return [factory.info("No containers found", "There are no Docker containers available")]

    results: List[Suggestion] = []
    for container in containers:
        name = display_name(container)
        next_command = "stop" if container.is_running else "start"
        results.append(
            factory.requery(
                f"{name} ({short_id(container.id)})",
                f"Status: {container.state} | Image: {container.image}",
                next_command,
                name,
                trailing_space=True,
                resource=container,
            )
        )
    return results


def list_images(engine: EngineClient, factory: SuggestionFactory) -> List[Suggestion]:
    """List every image; selecting one drills into ``rmi``."""
    try:
        images = engine.list_images(all=True)
    except EngineCallError as exc:
        logger.warning("Listing images failed: %s", exc.message)
        return [factory.error(exc.message, "Failed to retrieve images")]

    if not images:
        return [factory.info("No images found", "There are no Docker images available")]

    results: List[Suggestion] = []
    for image in images:
        tag = image_tag(image)
        results.append(
            factory.requery(
                tag,
                f"ID: {short_id(image.id)} | Size: {format_size(image.size)}",
                "rmi",
                tag,
                trailing_space=True,
                resource=image,
            )
        )
    return results


def containers_for_action(
    engine: EngineClient,
    factory: SuggestionFactory,
    action: str,
    title: str,
    eligible: Callable[[ContainerRecord], bool],
    participle: str,
) -> List[Suggestion]:
    """List containers passing ``eligible`` as ``<action> <name>`` re-queries."""
    try:
        containers = [c for c in engine.list_containers(all=True) if eligible(c)]
    except EngineCallError as exc:
        logger.warning("Listing %s candidates failed: %s", action, exc.message)
        return [factory.error(exc.message, "Failed to retrieve containers")]

    if not containers:
        return [
            factory.info(
                f"No containers available to {action}",
                f"There are no containers that can be {participle}",
            )
        ]

    results: List[Suggestion] = []
    for container in containers:
        name = display_name(container)
        results.append(
            factory.requery(
                f"{title}: {name}",
                f"ID: {short_id(container.id)} | Status: {container.state} | Image: {container.image}",
                action,
                name,
                resource=container,
            )
        )
    return results


def images_for_removal(engine: EngineClient, factory: SuggestionFactory) -> List[Suggestion]:
    """List top-level images as ``rmi <repo:tag>`` re-queries."""
    try:
        images = engine.list_images(all=False)
    except EngineCallError as exc:
        logger.warning("Listing rmi candidates failed: %s", exc.message)
        return [factory.error(exc.message, "Failed to retrieve images")]

    if not images:
        return [
            factory.info("No images found", "There are no Docker images available to remove")
        ]

    results: List[Suggestion] = []
    for image in images:
        tag = image_tag(image)
        results.append(
            factory.requery(
                f"Remove image: {tag}",
                f"ID: {short_id(image.id)} | Size: {format_size(image.size)}",
                "rmi",
                tag,
                resource=image,
            )
        )
    return results
