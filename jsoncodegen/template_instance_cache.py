"""Cache of container types instantiated from container templates."""

from __future__ import annotations

from typing import Any


class TemplateInstanceCache:
    """Keeps one container type per template, element type and arguments."""

    def __init__(self) -> None:
        self._instances: dict[tuple, Any] = {}

    def get(self, container_template, element_type, *args):
        """Return the cached instance, instantiating it on first request.

        The template's ``instantiate(cache, element_type, *args)`` creates it.
        """
        key = (container_template, element_type, *args)
        try:
            return self._instances[key]
        except KeyError:
            pass
        instance = container_template.instantiate(self, element_type, *args)
        self._instances[key] = instance
        return instance

    def __len__(self) -> int:
        return len(self._instances)