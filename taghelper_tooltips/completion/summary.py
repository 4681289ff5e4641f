"""Summary extraction and cleanup for XML documentation comments."""

from __future__ import annotations

import logging
import re

from .cref import resolve_cref, to_display_generics

logger = logging.getLogger(__name__)

_SUMMARY_RE = re.compile(r'<summary>(.*?)</summary>', re.DOTALL)
_CREF_RE = re.compile(r'<(?:see|seealso)\s+cref="([^">]*)"\s*/>')
_LINE_BREAK_RE = re.compile(r'\r\n|\r|\n')


def try_extract_summary(documentation: str | None) -> str | None:
    """Pull the summary out of raw documentation text.

    Resolution order:
      1. The first ``<summary>...</summary>`` block, returned untrimmed.
      2. None if the text looks like other XML (``<param>``, ``<returns>``...).
      3. Otherwise the whole text is prose and is returned trimmed.

    Returns:
        The summary, or None when there is no usable summary.
    """
    if not documentation:
        return None

    match = _SUMMARY_RE.search(documentation)
    if match:
        return match.group(1)

    documentation = documentation.strip()
    if documentation.startswith('<'):
        logger.debug("Documentation is markup without a summary")
        return None

    return documentation


def _replace_cref(match: re.Match) -> str:
    return f"`{to_display_generics(resolve_cref(match.group(1)))}`"


def clean_summary_content(summary: str) -> str:
    """Turn ``<see cref>``/``<seealso cref>`` tags into code spans and trim lines."""
    summary = _CREF_RE.sub(_replace_cref, summary)
    lines = (line.strip() for line in _LINE_BREAK_RE.split(summary))
    return "\n".join(lines).strip()
