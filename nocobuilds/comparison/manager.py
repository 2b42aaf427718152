"""Selection of builders for side-by-side comparison.

``ComparisonSet`` is a plain object owned by whoever constructs it; the
application creates one and hands it to every surface that needs it.
It assumes a single writer and does no locking.

Every operation is total. Adding a duplicate or adding past capacity is
silently ignored so a toggle button can call ``add`` unconditionally.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from nocobuilds.comparison.matrix import ComparisonSection, build_comparison_matrix
from nocobuilds.logging import get_logger
from nocobuilds.models.builder import Builder

logger = get_logger(__name__)

MAX_COMPARED_BUILDERS = 3


class ComparisonSet:
    """Ordered set of up to three builders, kept in selection order."""

    def __init__(self) -> None:
        self._builders: list[Builder] = []
        self._comparison_mode = False

    @property
    def builders(self) -> tuple[Builder, ...]:
        return tuple(self._builders)

    @property
    def builder_ids(self) -> list[str]:
        return [builder.builder_id for builder in self._builders]

    @property
    def is_comparison_mode(self) -> bool:
        """True while at least one builder is selected."""
        return self._comparison_mode

    @property
    def count(self) -> int:
        return len(self._builders)

    @property
    def can_add_more(self) -> bool:
        return len(self._builders) < MAX_COMPARED_BUILDERS

    def __len__(self) -> int:
        return len(self._builders)

    def __contains__(self, builder: object) -> bool:
        return isinstance(builder, Builder) and self.is_present(builder)

    def is_present(self, builder: Builder) -> bool:
        return any(selected.builder_id == builder.builder_id for selected in self._builders)

    def add(self, builder: Builder) -> None:
        """Append ``builder`` unless it is already selected or the set is full."""
        if self.is_present(builder):
            logger.debug(
                "Builder %s already in comparison",
                builder.builder_id,
                extra={"builder_id": builder.builder_id},
            )
            return
        if not self.can_add_more:
            logger.debug(
                "Comparison full (%d), ignoring builder %s",
                MAX_COMPARED_BUILDERS,
                builder.builder_id,
                extra={"builder_id": builder.builder_id},
            )
            return

        self._builders.append(builder)
        self._comparison_mode = True
        logger.debug(
            "Added builder %s to comparison (%d selected)",
            builder.builder_id,
            self.count,
            extra={"builder_id": builder.builder_id},
        )

    def remove(self, builder: Builder) -> None:
        """Remove ``builder`` by id; no-op if it is not selected."""
        remaining = [selected for selected in self._builders if selected.builder_id != builder.builder_id]
        if len(remaining) == len(self._builders):
            return

        self._builders = remaining
        if not self._builders:
            self._comparison_mode = False
        logger.debug(
            "Removed builder %s from comparison (%d selected)",
            builder.builder_id,
            self.count,
            extra={"builder_id": builder.builder_id},
        )

    def toggle(self, builder: Builder) -> None:
        if self.is_present(builder):
            self.remove(builder)
        else:
            self.add(builder)

    def clear(self) -> None:
        self._builders.clear()
        self._comparison_mode = False

    def build_matrix(self) -> list[ComparisonSection]:
        """Comparison table for the current selection, in selection order."""
        return build_comparison_matrix(self._builders)

    def record_comparison(self, now: datetime) -> dict[str, Any]:
        """Log a comparison view and return the payload for analytics or saving.

        Parameters
        ----------
        now : datetime
            Time the comparison was viewed.

        Returns
        -------
        dict[str, Any]
            ``builder_ids`` in selection order and ``recorded_at`` as ISO text.
        """
        payload = {"builder_ids": self.builder_ids, "recorded_at": now.isoformat()}
        logger.info(
            "Comparison recorded: %s at %s",
            payload["builder_ids"],
            payload["recorded_at"],
            extra={"builder_ids": payload["builder_ids"]},
        )
        return payload
