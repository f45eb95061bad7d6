"""Dotted path parsing for document extraction."""

from __future__ import annotations

SEPARATOR = "."
ESCAPE = "\\"


def parse_path(path: str) -> tuple[str, ...]:
    """Split ``path`` into segments on unescaped dots.

    A backslash is dropped and makes a following dot literal. Empty segments
    are never produced: consecutive, leading and trailing dots collapse, and
    the empty string yields no segments at all.
    """

    segments: list[str] = []
    current: list[str] = []
    escape = False
    for char in path:
        if char == ESCAPE:
            escape = True
            continue

        if char == SEPARATOR:
            if escape:
                escape = False
            else:
                if current:
                    segments.append("".join(current))
                    current.clear()
                continue

        current.append(char)

    if current:
        segments.append("".join(current))

    return tuple(segments)


def escape_segment(segment: str) -> str:
    """Escape the dots in ``segment`` so it parses back as a single segment."""

    return segment.replace(SEPARATOR, ESCAPE + SEPARATOR)


def join_path(*segments: str) -> str:
    """Build a raw path whose segments are exactly ``segments``.

    Segments must be non-empty and must not contain backslashes, since the
    parser drops every backslash it sees.
    """

    for segment in segments:
        if not segment:
            raise ValueError("path segments must be non-empty")
        if ESCAPE in segment:
            raise ValueError(f"path segment {segment!r} contains a backslash")
    return SEPARATOR.join(escape_segment(segment) for segment in segments)


__all__ = ["ESCAPE", "SEPARATOR", "escape_segment", "join_path", "parse_path"]
