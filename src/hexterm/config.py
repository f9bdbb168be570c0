"""Terminal capabilities read from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from hexterm.colors.codec import COLORTERM_VAR, supports_true_color


@dataclass
class TerminalConfig:
    """Snapshot of the terminal environment, passed to whoever needs it."""

    colorterm: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TerminalConfig":
        if environ is None:
            environ = os.environ
        return cls(colorterm=environ.get(COLORTERM_VAR))

    @property
    def true_color(self) -> bool:
        if self.colorterm is None:
            return False
        return supports_true_color({COLORTERM_VAR: self.colorterm})

    def to_dict(self) -> dict:
        return {
            "colorterm": self.colorterm,
            "true_color": self.true_color,
        }
