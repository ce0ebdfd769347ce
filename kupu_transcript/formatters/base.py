"""Abstract base formatter and output container.

WHY: An annotated transcript is consumed in different shapes: JSON for
the web player, readable text for reviewing vocabulary coverage. This
base class enforces one interface so the CLI (and anything else) can
work with any formatter generically.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list; every current formatter returns one item
- ``suffix`` starts with a hyphen, e.g. ``"-annotated.json"``
- The caller is responsible for prepending the source filename stem
- Formatters never modify the AnnotatedCue objects they receive
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence

from kupu_transcript.core.ir import AnnotatedCue


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-annotated.json"`` → ``"episode1-annotated.json"``.
        content: The file content.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all annotated-transcript formatters.

    A new output shape is one subclass in its own module, added under a
    snake_case key to FORMATTERS in formatters/__init__.py.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Annotated JSON'."""

    @abstractmethod
    def format(self, annotated: Sequence[AnnotatedCue]) -> List[FormatterOutput]:
        """Convert annotated cues into one or more output files.

        Args:
            annotated: Cues in source order, each with its segments.

        Returns:
            List of FormatterOutput objects.
        """
