# -*- coding: utf-8 -*-
"""
Release notes pipeline: reduces a markdown release body to plain-text notes.

Line-oriented, single pass, best effort. Steps run strictly in order:
1. Block Stripping - Remove <details> disclosure blocks
2. Line Classification - Tag each line as header, bullet, blank or unrecognized
3. Header Filtering - Keep headers that have a bullet within the next two lines
4. Bullet Transformation - Unwrap inline formatting, split sentences
5. Assembly - Join surviving lines, or report no content
"""
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Literal

logger = logging.getLogger(__name__)

LineKind = Literal["header", "bullet", "blank", "unrecognized"]

# A header is kept when a bullet sits at most this many lines below it
HEADER_LOOKAHEAD = 2

# Opener with no closer runs to the end of the input
DISCLOSURE_BLOCK_PATTERN = r"<details\b[^>]*>.*?(?:</details\s*>|\Z)"

# Newlines only; other Unicode line separators stay inside their line
LINE_BREAK_PATTERN = r"\r\n|\r|\n"

HEADER_PATTERN = r"^(#+)\s*(.*)$"
BULLET_PATTERN = r"^[-*] (\s*\S.*)$"

# Inline formatting, applied in this order to bullet content
BOLD_PATTERN = r"\*\*(.+?)\*\*"
CODE_PATTERN = r"`([^`]+)`"
STRIKETHROUGH_PATTERN = r"~+([^~]+?)~+"
LINK_PATTERN = r"\[([^\]]*)\]\([^)]*\)"

# Spaces following a period mark a sentence boundary
SENTENCE_BOUNDARY_PATTERN = r"(?<=\.) +"


@dataclass(frozen=True)
class Line:
    """One classified line of the stripped release body."""

    position: int
    raw: str
    kind: LineKind
    text: str = ""
    level: int = 0


@dataclass
class FormatResult:
    """Result of the release notes pipeline."""

    notes: str | None
    lines: list[str] = field(default_factory=list)
    steps_applied: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def has_content(self) -> bool:
        return self.notes is not None


class ReleaseNotesPipeline:
    """
    Pipeline turning a free-form release body into display-safe notes.

    Holds compiled patterns only, so one instance can be shared freely.
    """

    def __init__(self):
        self._block_pattern = re.compile(
            DISCLOSURE_BLOCK_PATTERN, re.IGNORECASE | re.DOTALL
        )
        self._line_break_pattern = re.compile(LINE_BREAK_PATTERN)
        self._header_pattern = re.compile(HEADER_PATTERN)
        self._bullet_pattern = re.compile(BULLET_PATTERN)
        self._inline_patterns = [
            re.compile(BOLD_PATTERN),
            re.compile(CODE_PATTERN),
            re.compile(STRIKETHROUGH_PATTERN),
            re.compile(LINK_PATTERN),
        ]
        self._sentence_pattern = re.compile(SENTENCE_BOUNDARY_PATTERN)

    def format(self, body: str | None) -> str | None:
        """Return the formatted notes for ``body``, or None if nothing survives."""
        return self.process(body).notes

    def process(self, body: str | None) -> FormatResult:
        """
        Run the release body through every step.

        Args:
            body: Raw markdown release body, possibly None

        Returns:
            FormatResult whose ``notes`` is None when no content survives
        """
        result = FormatResult(notes=None)

        if body is None or not body.strip():
            logger.debug("Release body is empty, nothing to format")
            return result

        # Step 1: Block Stripping
        text, blocks_removed = self._step_strip_blocks(body)
        result.steps_applied.append("block_stripping")
        result.metadata["blocks_removed"] = blocks_removed

        # Step 2: Line Classification
        lines = self._step_classify(text)
        result.steps_applied.append("line_classification")

        # Steps 3 and 4 share one ordered walk so output keeps source order
        formatted: list[str] = []
        headers_kept = headers_dropped = bullets_kept = bullets_dropped = 0
        for line in lines:
            if line.kind == "header":
                if self._step_keep_header(line, lines):
                    formatted.append(line.text)
                    headers_kept += 1
                else:
                    headers_dropped += 1
            elif line.kind == "bullet":
                pieces = self._step_transform_bullet(line.text)
                if pieces:
                    formatted.extend(pieces)
                    bullets_kept += 1
                else:
                    bullets_dropped += 1
        result.steps_applied.extend(["header_filter", "bullet_transform"])
        result.metadata.update(
            headers_kept=headers_kept,
            headers_dropped=headers_dropped,
            bullets_kept=bullets_kept,
            bullets_dropped=bullets_dropped,
        )

        # Step 5: Assembly
        result.lines = formatted
        result.notes = self._step_assemble(formatted)
        result.steps_applied.append("assembly")

        logger.debug(
            "Release notes formatted",
            extra={
                "input_length": len(body),
                "output_lines": len(formatted),
                **result.metadata,
            },
        )
        return result

    def _step_strip_blocks(self, text: str) -> tuple[str, int]:
        """
        Step 1: Remove <details> disclosure blocks.

        Matching is case-insensitive and non-nested: an opener pairs with the
        next closer. Returns (stripped_text, blocks_removed).
        """
        return self._block_pattern.subn("", text)

    def _step_classify(self, text: str) -> list[Line]:
        """Step 2: Split text into positioned, classified lines."""
        return [
            self._classify_line(position, raw)
            for position, raw in enumerate(self._line_break_pattern.split(text))
        ]

    def _classify_line(self, position: int, raw: str) -> Line:
        stripped = raw.strip()

        header = self._header_pattern.match(stripped)
        if header:
            title = header.group(2).strip()
            if not title:
                # Markers only, nothing to display
                return Line(position, raw, "unrecognized")
            return Line(position, raw, "header", text=title, level=len(header.group(1)))

        bullet = self._bullet_pattern.match(stripped)
        if bullet:
            return Line(position, raw, "bullet", text=bullet.group(1))

        if not stripped:
            return Line(position, raw, "blank")

        return Line(position, raw, "unrecognized")

    @staticmethod
    def _step_keep_header(header: Line, lines: list[Line]) -> bool:
        """
        Step 3: Decide whether a header is kept.

        Headers without a bullet in the next HEADER_LOOKAHEAD lines are
        orphaned titles and get dropped.
        """
        window = lines[header.position + 1:header.position + 1 + HEADER_LOOKAHEAD]
        return any(line.kind == "bullet" for line in window)

    def _step_transform_bullet(self, content: str) -> list[str]:
        """
        Step 4: Turn bullet content into one or more output lines.

        Inline formatting is unwrapped first, then sentences are split onto
        their own lines, indented under the dash. Returns an empty list when
        nothing is left to show.
        """
        text = self._unwrap_inline(content).strip()

        if not text:
            return []

        sentences = [s for s in self._sentence_pattern.split(text) if s]
        return [f"- {sentences[0]}"] + [f"  {sentence}" for sentence in sentences[1:]]

    def _unwrap_inline(self, text: str) -> str:
        """Strip inline markers until unwrapping exposes no new ones."""
        # Every substitution drops marker characters, so this terminates
        while True:
            unwrapped = text
            for pattern in self._inline_patterns:
                unwrapped = pattern.sub(r"\1", unwrapped)
            if unwrapped == text:
                return text
            text = unwrapped

    @staticmethod
    def _step_assemble(lines: list[str]) -> str | None:
        """Step 5: Join output lines; None when there are none."""
        if not lines:
            return None
        return "\n".join(lines)


# Global pipeline instance
release_notes_pipeline = ReleaseNotesPipeline()


def format_release_notes(body: str | None) -> str | None:
    """
    Format a markdown release body as plain-text release notes.

    Returns None when the body is absent, blank, or has no header or bullet
    content that survives filtering.
    """
    return release_notes_pipeline.format(body)


def format_release(release: Any) -> str | None:
    """Format the ``body`` of a release object (e.g. a GitHub release)."""
    return format_release_notes(getattr(release, "body", None))
