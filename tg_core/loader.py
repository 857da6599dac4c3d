"""Entry-point discovery and ``module:attr`` reference loading."""

from __future__ import annotations

import importlib
import importlib.metadata
import logging
from typing import Any, Callable, Iterable

from tg_common.errors import ConfigurationError

logger = logging.getLogger(__name__)


def discover_entrypoints(
    groups: Iterable[str],
) -> dict[str, importlib.metadata.EntryPoint]:
    """Collect entry points without importing them. Loaded on demand."""
    pending: dict[str, importlib.metadata.EntryPoint] = {}
    for group in groups:
        try:
            eps = importlib.metadata.entry_points().select(group=group)
        except Exception as exc:
            logger.debug("Failed to read entry points for group %s: %s", group, exc)
            eps = ()
        for entry_point in eps:
            pending.setdefault(entry_point.name, entry_point)
    return pending


def load_entrypoint(
    entry_point: importlib.metadata.EntryPoint,
    register: Callable[[str, Any], None],
    *,
    label: str = "entry point",
) -> None:
    """Load a single entry point and hand it to ``register`` under its name."""
    try:
        register(entry_point.name, entry_point.load())
    except ImportError as exc:
        logger.debug(
            "Skipping %s %s due to missing dependency: %s", label, entry_point.name, exc
        )
    except Exception as exc:
        logger.warning("Failed to load %s %s: %s", label, entry_point.name, exc)


def is_reference(value: Any) -> bool:
    """True for ``"package.module:attribute"`` strings."""
    return isinstance(value, str) and ":" in value and not value.startswith(":")


def import_reference(reference: str) -> Any:
    """Import ``package.module:attr.path`` and return the attribute."""
    module_name, _, attr_path = reference.partition(":")
    if not module_name or not attr_path:
        raise ConfigurationError(
            f"Invalid reference {reference!r}; expected 'module:attribute'",
            context={"reference": reference},
        )
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(
            f"Cannot import module {module_name!r}",
            context={"reference": reference},
            cause=exc,
        ) from exc
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ConfigurationError(
                f"{module_name!r} has no attribute {attr_path!r}",
                context={"reference": reference},
                cause=exc,
            ) from exc
    return target
