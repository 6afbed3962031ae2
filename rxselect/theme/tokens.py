"""
rxselect — Tokens

Owns:
- Token dataclasses
- THEME instance (all raw values)
- Shorthands (C, SP, R)

No component styles here.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ColorTokens:
    border: str
    fg: str
    fg_muted: str


@dataclass(frozen=True)
class SpacingTokens:
    space_0: str
    space_1: str
    space_5: str


@dataclass(frozen=True)
class RadiusTokens:
    r_sm: str


@dataclass(frozen=True)
class ThemeTokens:
    colors: ColorTokens
    spacing: SpacingTokens
    radius: RadiusTokens


THEME = ThemeTokens(
    colors=ColorTokens(
        border="#dddddd",
        fg="#333333",
        fg_muted="#999999",
    ),
    spacing=SpacingTokens(
        space_0="0px",
        space_1="1px",
        space_5="5px",
    ),
    radius=RadiusTokens(
        r_sm="4px",
    ),
)

C = THEME.colors
SP = THEME.spacing
R = THEME.radius

__all__ = ["THEME", "C", "SP", "R"]
