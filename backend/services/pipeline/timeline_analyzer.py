"""Resume timeline analysis: experience years and employment gaps from date ranges.

Recognized ranges (case-insensitive):
    "2015-2018", "2015 - Present"      hyphen
    "2015 to 2018", "2015 to current"  the word "to"
    "2015–2018", "2015 — 2018"         en or em dash

Two modes:
    scan           Each pattern is exhausted in turn (all hyphen matches, then
                   all "to" matches, then all dash matches). Gaps are measured
                   against the previous match in that order and every match is
                   counted, inverted or repeated ones included.
    chronological  Matches from all patterns are pooled, de-duplicated by
                   (start, end), inverted ranges dropped, and sorted by start
                   year. Gaps are measured against the latest end year so far.
"""

import logging
import re

from models.responses import Gap
from models.schemas.timeline import DateRange, TimelineAnalysis, TimelineMode

logger = logging.getLogger(__name__)

_YEAR = r"((?:19|20)\d{2})"
_END = r"((?:19|20)\d{2}|present|current)"

# Order matters in scan mode
DATE_RANGE_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(rf"\b{_YEAR}\s*-\s*{_END}\b", re.IGNORECASE),
    re.compile(rf"\b{_YEAR}\s+to\s+{_END}\b", re.IGNORECASE),
    re.compile(rf"\b{_YEAR}\s*[–—]\s*{_END}\b", re.IGNORECASE),
)

_OPEN_ENDED = {"present", "current"}

# A gap is reported only when more than this many years separate two ranges
GAP_THRESHOLD_YEARS = 1


def _resolve_end(token: str, current_year: int) -> int:
    if token.lower() in _OPEN_ENDED:
        return current_year
    return int(token)


def find_date_ranges(text: str, current_year: int) -> list[DateRange]:
    """Return every range match, pattern by pattern, each in text order."""
    ranges: list[DateRange] = []
    for pattern in DATE_RANGE_PATTERNS:
        for match in pattern.finditer(text):
            ranges.append(
                DateRange(
                    start_year=int(match.group(1)),
                    end_year=_resolve_end(match.group(2), current_year),
                )
            )
    return ranges


def _make_gap(last_end: int, start: int) -> Gap:
    return Gap(period=f"{last_end} - {start}", duration_years=start - last_end)


def _scan_order(ranges: list[DateRange]) -> TimelineAnalysis:
    total = 0
    gaps: list[Gap] = []
    last_end: int | None = None

    for rng in ranges:
        if last_end is not None and rng.start_year - last_end > GAP_THRESHOLD_YEARS:
            gaps.append(_make_gap(last_end, rng.start_year))
        total += rng.years
        last_end = rng.end_year

    return TimelineAnalysis(total_experience_years=total, gaps=gaps, ranges=ranges)


def _chronological(ranges: list[DateRange]) -> TimelineAnalysis:
    unique: dict[tuple[int, int], DateRange] = {}
    for rng in ranges:
        if rng.end_year < rng.start_year:
            logger.debug("Dropping inverted range %d-%d", rng.start_year, rng.end_year)
            continue
        unique.setdefault((rng.start_year, rng.end_year), rng)

    ordered = sorted(unique.values(), key=lambda r: (r.start_year, r.end_year))

    total = 0
    gaps: list[Gap] = []
    latest_end: int | None = None

    for rng in ordered:
        if latest_end is not None and rng.start_year - latest_end > GAP_THRESHOLD_YEARS:
            gaps.append(_make_gap(latest_end, rng.start_year))
        total += rng.years
        latest_end = rng.end_year if latest_end is None else max(latest_end, rng.end_year)

    return TimelineAnalysis(total_experience_years=total, gaps=gaps, ranges=ordered)


def analyze_timeline(
    resume_text: str,
    current_year: int,
    mode: TimelineMode = "chronological",
) -> TimelineAnalysis:
    """Total up experience years and detect gaps from date ranges in resume text."""
    ranges = find_date_ranges(resume_text, current_year)

    if mode == "scan":
        result = _scan_order(ranges)
    elif mode == "chronological":
        result = _chronological(ranges)
    else:
        raise ValueError(f"Unknown timeline mode: {mode}")

    logger.debug(
        "Timeline (%s): %d ranges, %d years, %d gaps",
        mode, len(result.ranges), result.total_experience_years, len(result.gaps),
    )
    return result
