"""FormConfigResolver — locates a form config file and builds form options."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from fastapi_formbuilder.config import RESOLUTION_KEYS, FormConfig
from fastapi_formbuilder.exceptions import MissingRequiredSource
from fastapi_formbuilder.registry import FormDescriptor

logger = logging.getLogger(__name__)

_PATH_SEPARATOR = re.compile(r"\s*:\s*")

ResolvedOptions = dict[str, Any]


class FormConfigResolver:
    """Turns a route's form descriptor into form construction options.

    The config file is named ``<name>.<suffix>``, where ``name`` is the
    descriptor's explicit name or the request path. Every directory of the
    search path is consulted in order and the last readable match wins.
    """

    def __init__(self, config: FormConfig, *, debug: bool | None = None) -> None:
        self._config = config
        self._debug = debug

    @property
    def config(self) -> FormConfig:
        return self._config

    @property
    def suffix(self) -> str:
        return self._config.form_suffix

    @property
    def search_path(self) -> list[str]:
        form_path = self._config.form_path
        if isinstance(form_path, list):
            dirs = form_path
        else:
            dirs = _PATH_SEPARATOR.split(form_path.strip())
        return [d for d in dirs if d]

    @property
    def debug_level(self) -> int:
        debug = self._debug
        if debug is None:
            debug = logger.isEnabledFor(logging.DEBUG)
        return 2 if debug else 0

    def candidate_name(self, name: str) -> str:
        return f"{name}.{self.suffix}"

    def find_source(self, filename: str, *, name: str | None = None) -> str | None:
        """Return the last readable ``filename`` found along the search path."""
        label = name if name is not None else filename
        source = None
        for directory in self.search_path:
            conf = Path(directory) / filename
            if conf.is_file() and os.access(conf, os.R_OK):
                logger.debug("Form (%s): Found form config %s", label, conf)
                source = str(conf)
        return source

    def resolve(
        self,
        descriptor: FormDescriptor,
        request_path: str,
        params: Mapping[str, Any] | None = None,
    ) -> ResolvedOptions:
        name = (descriptor.name or request_path).lstrip("/")
        filename = self.candidate_name(name)
        search_path = self.search_path

        logger.debug(
            "Form (%s): Looking for form config in %s", name, ":".join(search_path)
        )
        source = self.find_source(filename, name=name)

        if source is None:
            if descriptor.fatal:
                logger.error(
                    "Form (%s): Can't find form config %s in %s",
                    name,
                    filename,
                    ":".join(search_path),
                )
                raise MissingRequiredSource(name, filename, search_path)
            logger.warning(
                "Form (%s): Can't access form config %s in %s",
                name,
                filename,
                ":".join(search_path),
            )

        options: ResolvedOptions = self._config.defaults
        options["params"] = dict(params or {})
        options["action"] = "/" + request_path.lstrip("/")
        options["debug"] = self.debug_level
        if source is not None:
            options["source"] = source
        options.update(descriptor.options)

        for key in RESOLUTION_KEYS:
            options.pop(key, None)

        return options
