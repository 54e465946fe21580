"""
Drops fragments that can never be menu content: red legend ink, anything
outside the content band, and the category captions of the page profile.
"""

import logging

from menu_parser.config import Band, LayoutConfig
from menu_parser.state import Fragment

logger = logging.getLogger(__name__)


def _in_band(top: int, band: Band) -> bool:
    return band[0] <= top < band[1]


def filter_fragments(state: dict) -> dict:
    """Keep content fragments, sorted by (top, left) for the merger."""
    config: LayoutConfig = state["config"]
    dimensions = state["dimensions"]
    label_bands = config.bands_for(dimensions["width"], dimensions["height"])

    kept: list[Fragment] = []
    red = out_of_band = labels = 0
    for fragment in state["fragments"]:
        if fragment.get("color") == "red":
            red += 1
        elif not _in_band(fragment["top"], config.content_band):
            out_of_band += 1
        elif any(_in_band(fragment["top"], band) for band in label_bands):
            labels += 1
        else:
            kept.append(fragment)

    kept.sort(key=lambda f: (f["top"], f["left"]))

    logger.debug("Dropped %d red, %d out-of-band, %d category label fragments",
                 red, out_of_band, labels)
    logger.info("Kept %d of %d fragments", len(kept), len(state["fragments"]))
    return {"fragments": kept}
