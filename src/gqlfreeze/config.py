"""
Configuration for gqlfreeze.

Defines CodecSettings, a frozen dataclass carrying runtime options for encoding,
decoding, and logging. Defaults come from gqlfreeze.core.constants.

Source of truth
- gqlfreeze.core.constants.DEFAULT_VARIABLE_PREFIX

Precedence
- environment (GQLFREEZE_*) > TOML (gqlfreeze.toml or [tool.gqlfreeze.codec]) > defaults

Notes
- Malformed values are ignored and the previous value is kept.
- strict_decode=False makes decoding skip response keys the codec does not know.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from gqlfreeze.core.constants import DEFAULT_VARIABLE_PREFIX
from gqlfreeze.core.grammar import is_graphql_name

__all__ = [
    "CodecSettings",
]

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


_TRUE = {"1", "true", "t", "yes", "y", "on"}
_FALSE = {"0", "false", "f", "no", "n", "off"}


def _bool(v: Any) -> bool | None:
    """Parse a loose boolean; None when v is not recognizably one."""
    if isinstance(v, bool):
        return v
    if isinstance(v, int) and v in (0, 1):
        return bool(v)
    if isinstance(v, str):
        token = v.strip().lower()
        if token in _TRUE:
            return True
        if token in _FALSE:
            return False
    return None


@dataclass(frozen=True)
class CodecSettings:
    """
    Runtime settings for encoding, decoding, and logging.

    Attributes:
        variable_prefix (str): Prefix of generated variable names ($v1, $v2, ...).
            Must itself be a valid GraphQL name.
        strict_decode (bool): If True, a response key without a decoder raises
            MissingDecoder; if False it is skipped.
        log_level (str): Level for gqlfreeze loggers ("DEBUG" ... "CRITICAL").
        log_json (bool): Render log events as JSON instead of console lines.

    Examples:
        >>> from gqlfreeze.config import CodecSettings
        >>> CodecSettings(variable_prefix="arg").variable_prefix
        'arg'
    """

    variable_prefix: str = DEFAULT_VARIABLE_PREFIX
    strict_decode: bool = True
    log_level: str = "WARNING"
    log_json: bool = False

    @classmethod
    def _apply_mapping(cls, base: CodecSettings, cfg: dict[str, Any] | None) -> CodecSettings:
        """Apply a loose config mapping onto CodecSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        # variable_prefix
        if "variable_prefix" in cfg and isinstance(cfg["variable_prefix"], str):
            prefix = cfg["variable_prefix"].strip()
            if is_graphql_name(prefix):
                s = replace(s, variable_prefix=prefix)

        # strict_decode
        strict = _bool(cfg.get("strict_decode"))
        if strict is not None:
            s = replace(s, strict_decode=strict)

        # log_level
        if "log_level" in cfg and isinstance(cfg["log_level"], str):
            level = cfg["log_level"].strip().upper()
            if level in _LOG_LEVELS:
                s = replace(s, log_level=level)

        # log_json
        log_json = _bool(cfg.get("log_json"))
        if log_json is not None:
            s = replace(s, log_json=log_json)

        return s

    @classmethod
    def from_env(cls, base: CodecSettings | None = None, prefix: str = "GQLFREEZE_") -> CodecSettings:
        """
        Build CodecSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - GQLFREEZE_VARIABLE_PREFIX
            - GQLFREEZE_STRICT_DECODE (1/0/true/false/yes/no/on/off)
            - GQLFREEZE_LOG_LEVEL
            - GQLFREEZE_LOG_JSON
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("variable_prefix", "strict_decode", "log_level", "log_json"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> CodecSettings:
        """
        Build CodecSettings from a TOML file.

        Search order when `path` is None:
            1) ./gqlfreeze.toml (with either a [codec] table or top-level keys)
            2) ./pyproject.toml under [tool.gqlfreeze.codec]

        Returns defaults if no file is present or none of them parse.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "gqlfreeze.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                cfg = data
                for key in ("tool", "gqlfreeze", "codec"):
                    cfg = cfg.get(key) if isinstance(cfg, dict) else None
            elif isinstance(data.get("codec"), dict):
                cfg = data["codec"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> CodecSettings:
        """
        Load CodecSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (gqlfreeze.toml, pyproject.toml).

        Returns:
            CodecSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
