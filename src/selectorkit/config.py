from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecConfig:
    indent: int | None = None  # None renders compact output
    ensure_ascii: bool = False
    sort_keys: bool = False

    @property
    def separators(self) -> tuple[str, str]:
        if self.indent is None:
            return (",", ":")
        return (",", ": ")


DEFAULT_CODEC_CONFIG = CodecConfig()
