"""Shared type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

# Builds the form object handed to route handlers from resolved options
FormFactory = Callable[..., Any]
