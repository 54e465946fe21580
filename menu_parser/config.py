"""
Tunable constants for layout reconstruction.

All distances are in renderer pixels. The CLI builds a LayoutConfig from the
environment (after python-dotenv has loaded .env); the pipeline itself only
ever receives the object.
"""

import os
from dataclasses import dataclass, field, replace

Band = tuple[int, int]   # half-open [start, end) range of `top` values

_ENV_PREFIX = "MENU_PARSER_"
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class PageProfile:
    """Category label bands ("Entrées", "Plats", ...) for one page geometry."""

    width: int
    height: int
    label_bands: tuple[Band, ...]


# A4 landscape first: it is the fallback for unknown geometries.
DEFAULT_PAGE_PROFILES: tuple[PageProfile, ...] = (
    PageProfile(842, 595, ((181, 191), (272, 282), (371, 381), (424, 434))),
    PageProfile(792, 612, ((186, 196), (281, 291), (383, 393), (438, 448))),
)


@dataclass(frozen=True)
class LayoutConfig:
    content_band: Band = (120, 525)
    page_profiles: tuple[PageProfile, ...] = field(default=DEFAULT_PAGE_PROFILES)
    merge_drift: int = 12
    char_width: int = 4
    column_tolerance: int = 30
    multiline_tolerance: int = 15
    repeated_row_margin: int = 1
    repeated_row_min_count: int = 2
    drop_usual_items: bool = False
    usual_items_min_columns: int = 4

    def bands_for(self, width: int, height: int) -> tuple[Band, ...]:
        """Label bands for an exact page geometry, else the first profile's."""
        if not self.page_profiles:
            return ()
        for profile in self.page_profiles:
            if profile.width == width and profile.height == height:
                return profile.label_bands
        return self.page_profiles[0].label_bands

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "LayoutConfig":
        env = os.environ if environ is None else environ
        overrides: dict = {}

        band = env.get(_ENV_PREFIX + "CONTENT_BAND")
        if band is not None:
            overrides["content_band"] = _parse_band(band)

        for name in (
            "merge_drift",
            "char_width",
            "column_tolerance",
            "multiline_tolerance",
            "repeated_row_margin",
            "repeated_row_min_count",
            "usual_items_min_columns",
        ):
            raw = env.get(_ENV_PREFIX + name.upper())
            if raw is None:
                continue
            try:
                overrides[name] = int(raw)
            except ValueError:
                raise ValueError(f"{_ENV_PREFIX}{name.upper()} must be an integer, got {raw!r}") from None

        raw = env.get(_ENV_PREFIX + "DROP_USUAL_ITEMS")
        if raw is not None:
            overrides["drop_usual_items"] = _parse_bool(_ENV_PREFIX + "DROP_USUAL_ITEMS", raw)

        return replace(cls(), **overrides)


def _parse_band(raw: str) -> Band:
    try:
        start, end = (int(part) for part in raw.split("-", 1))
    except ValueError:
        raise ValueError(f"{_ENV_PREFIX}CONTENT_BAND must look like '120-525', got {raw!r}") from None
    if start >= end:
        raise ValueError(f"{_ENV_PREFIX}CONTENT_BAND is empty: {raw!r}")
    return (start, end)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")
