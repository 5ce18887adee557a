"""Application configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from figdict.errors import ConfigurationError
from figdict.models import TargetKind, TargetSelector

DEFAULT_API_BASE = "https://api.figma.com/v1"


@dataclass(slots=True)
class AppConfig:
    token: str | None = None
    file_key: str | None = None
    target_type: str = "file"
    target_name: str | None = None
    target_id: str | None = None
    output_dir: Path = Path(".")
    api_base: str = DEFAULT_API_BASE
    timeout: float = 30.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AppConfig":
        """Build a config from ``FIGMA_TOKEN``, ``FILE_KEY`` and ``TARGET_*`` variables."""
        env = os.environ if environ is None else environ
        return cls(
            token=env.get("FIGMA_TOKEN") or None,
            file_key=env.get("FILE_KEY") or None,
            target_type=env.get("TARGET_TYPE") or "file",
            target_name=env.get("TARGET_NAME") or None,
            target_id=env.get("TARGET_ID") or None,
            api_base=env.get("FIGMA_API_BASE") or DEFAULT_API_BASE,
        )

    def validate(self) -> None:
        if not self.token or not self.file_key:
            raise ConfigurationError("Missing FIGMA_TOKEN or FILE_KEY")
        self.selector()

    def selector(self) -> TargetSelector:
        try:
            kind = TargetKind(self.target_type.lower())
        except ValueError as exc:
            choices = ", ".join(k.value for k in TargetKind)
            raise ConfigurationError(
                f"Unknown target type {self.target_type!r} (expected one of: {choices})"
            ) from exc

        if kind is TargetKind.FILE:
            return TargetSelector(kind)
        if kind is TargetKind.NODE:
            identifier = self.target_id or self.target_name
        else:
            identifier = self.target_name or self.target_id
        if not identifier:
            raise ConfigurationError(
                f"Target type {kind.value!r} requires TARGET_NAME or TARGET_ID"
            )
        return TargetSelector(kind, identifier)
