"""
Fragment sources: an HTML position dump or a PDF read with pdfplumber.

Both produce the same thing, a list of positioned fragments plus the page box
the label bands are keyed on.
"""

import html
import logging
import re
from pathlib import Path

import pdfplumber

from menu_parser.state import Fragment, PageDimensions

logger = logging.getLogger(__name__)

_DIV_RE = re.compile(r"<div style='([^']+)'>(.+?)</div>")
_PAGE_BOX_RE = re.compile(r"<div[^>]*\bstyle='([^']*\bwidth:\s?\d[^']*)'")
_TOP_RE = re.compile(r"top:\s?(\d+)(?:\.\d+)?px")
_LEFT_RE = re.compile(r"left:\s?(\d+)(?:\.\d+)?px")
_WIDTH_RE = re.compile(r"width:\s?(\d+)(?:\.\d+)?px")
_HEIGHT_RE = re.compile(r"height:\s?(\d+)(?:\.\d+)?px")
_TAG_RE = re.compile(r"<[^>]+>")

_RED_MIN = 0.8     # dominant channel
_RED_MAX = 0.3     # other channels


def load_html_dump(dump: str) -> tuple[list[Fragment], PageDimensions]:
    """Parse `<div style='top: Npx; left: Npx'>text</div>` items."""
    dump = dump.replace("&nbsp;", " ")

    fragments: list[Fragment] = []
    skipped = 0
    for match in _DIV_RE.finditer(dump):
        style = match.group(1)
        top = _TOP_RE.search(style)
        left = _LEFT_RE.search(style)
        if not top or not left:
            skipped += 1
            continue
        fragments.append(Fragment(
            top=int(top.group(1)),
            left=int(left.group(1)),
            text=html.unescape(_TAG_RE.sub("", match.group(2))),
            color="red" if "color: red" in style else "",
        ))

    dimensions = PageDimensions(width=0, height=0)
    for box in _PAGE_BOX_RE.finditer(dump):
        width = _WIDTH_RE.search(box.group(1))
        height = _HEIGHT_RE.search(box.group(1))
        if width and height:
            dimensions = PageDimensions(width=int(width.group(1)), height=int(height.group(1)))
            break

    if skipped:
        logger.debug("Skipped %d divs without a position", skipped)
    logger.info("Read %d fragments from HTML dump (page %dx%d)",
                len(fragments), dimensions["width"], dimensions["height"])
    return fragments, dimensions


def _color_class(color) -> str:
    """Map a pdfplumber fill colour (gray, RGB or CMYK tuple) to an ink class."""
    if not isinstance(color, (tuple, list)):
        return ""
    try:
        channels = [float(c) for c in color]
    except (TypeError, ValueError):
        return ""

    if len(channels) == 3:
        r, g, b = channels
        if r >= _RED_MIN and g <= _RED_MAX and b <= _RED_MAX:
            return "red"
    elif len(channels) == 4:
        c, m, y, k = channels
        if c <= _RED_MAX and m >= _RED_MIN and y >= _RED_MIN and k <= _RED_MAX:
            return "red"
    return ""


def load_pdf(pdf_path: str) -> tuple[list[Fragment], PageDimensions]:
    """Read the first page of a PDF as positioned fragments."""
    path = Path(pdf_path)
    if not path.exists():
        raise FileNotFoundError(f"PDF not found: {pdf_path}")

    logger.info("Extracting words with pdfplumber: %s", pdf_path)
    with pdfplumber.open(str(path)) as pdf:
        if not pdf.pages:
            logger.warning("PDF has no pages: %s", pdf_path)
            return [], PageDimensions(width=0, height=0)
        if len(pdf.pages) > 1:
            logger.warning("Only the first of %d pages is read", len(pdf.pages))

        page = pdf.pages[0]
        dimensions = PageDimensions(width=int(page.width), height=int(page.height))
        words = page.extract_words(
            keep_blank_chars=True,
            use_text_flow=False,
            extra_attrs=["non_stroking_color"],
        )

    fragments = [
        Fragment(
            top=int(word["top"]),
            left=int(word["x0"]),
            text=word["text"],
            color=_color_class(word.get("non_stroking_color")),
        )
        for word in words
    ]

    logger.info("Read %d fragments from PDF (page %dx%d)",
                len(fragments), dimensions["width"], dimensions["height"])
    return fragments, dimensions


def load_document(path: str) -> tuple[list[Fragment], PageDimensions]:
    """Dispatch on suffix: `.pdf` through pdfplumber, anything else as an HTML dump."""
    doc_path = Path(path)
    if doc_path.suffix.lower() == ".pdf":
        return load_pdf(str(doc_path))
    if not doc_path.exists():
        raise FileNotFoundError(f"Document not found: {path}")
    return load_html_dump(doc_path.read_text(encoding="utf-8"))
