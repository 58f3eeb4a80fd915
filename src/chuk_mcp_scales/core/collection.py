"""
ScaleCollection - one interval pattern spread across every root.

A collection turns a ScaleSpec into the keyed set of concrete scales a
reader can browse: 'g' -> G major, 'bb' -> Bb major, and so on.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from chuk_mcp_scales.models.spec import ScaleSpec

from .catalogue import Catalogue, build_catalogue
from .note import Note
from .scale import Scale, pad_columns

logger = logging.getLogger(__name__)

# The blues scale's flat fifth sits at this index and is always respelled
BLUES_FIFTH_INDEX = 3


class ScaleCollection:
    """
    Scales of the same format and type built on every root-eligible note.

    Roots whose scale would need an unresolvable note, or more than a
    double sharp/flat anywhere, are left out.
    """

    def __init__(self, spec: ScaleSpec, catalogue: Catalogue | None = None):
        """
        Initialize the collection.

        Args:
            spec: The format, type, interval pattern and simplify flag
            catalogue: Note/interval catalogue (built fresh if omitted)
        """
        self.spec = spec
        self.catalogue = catalogue or build_catalogue()
        self._scales: dict[str, Scale] | None = None

    @property
    def format(self) -> str:
        return self.spec.format

    @property
    def type(self) -> str:
        return self.spec.type

    @property
    def intervals(self) -> tuple[str, ...]:
        return self.spec.intervals

    @property
    def simplify(self) -> bool:
        return self.spec.simplify

    @property
    def name(self) -> str:
        """Display name, e.g. 'major scale'."""
        return self.spec.name

    @property
    def scales(self) -> dict[str, Scale]:
        """Valid scales keyed by lowercase root spelling (generated on first use)."""
        if self._scales is None:
            self._scales = self.generate_all()
        return self._scales

    @property
    def roots(self) -> list[str]:
        """Root spellings that have a valid scale, in catalogue order."""
        return [scale.root.spelling for scale in self.scales.values()]

    def generate_all(self) -> dict[str, Scale]:
        """
        Build a scale for every root-eligible note and keep the valid ones.

        Blues scales always have their flat fifth respelled; every other
        note is respelled only when the spec asks for simplification.

        Returns:
            Valid scales keyed by lowercase root spelling
        """
        scales: dict[str, Scale] = {}
        dropped: list[str] = []

        for root in self.catalogue.root_notes:
            scale = self._build_scale(root)
            if scale.is_valid():
                scales[root.key] = scale
            else:
                dropped.append(root.spelling)

        if dropped:
            logger.debug(f"{self.name}: dropped {len(dropped)} roots ({', '.join(dropped)})")

        self._scales = scales
        return scales

    def _build_scale(self, root: Note) -> Scale:
        scale = Scale.build(root, self.format, self.type, self.intervals, self.catalogue)

        if self.type == "blues" and self.format == "scale" and len(scale) > BLUES_FIFTH_INDEX:
            scale = scale.respell_at(BLUES_FIFTH_INDEX)

        if self.simplify:
            scale = scale.respell_all()

        return scale

    def get(self, root: str) -> Scale | None:
        """
        Get the scale for a root note.

        Args:
            root: Root spelling, any case (e.g. 'Bb', 'f#')

        Returns:
            The Scale, or None if there is no valid scale on that root
        """
        return self.scales.get(root.strip().lower())

    def format_pattern(self) -> str:
        """Interval pattern on a single line in fixed-width columns."""
        return pad_columns(list(self.intervals))

    def to_line(self) -> str:
        """Encode the collection's spec as a custom scales file line."""
        return self.spec.to_line()

    def __len__(self) -> int:
        return len(self.scales)

    def __iter__(self) -> Iterator[Scale]:
        return iter(self.scales.values())

    def __contains__(self, root: object) -> bool:
        return isinstance(root, str) and self.get(root) is not None

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ScaleCollection({self.spec!r})"
