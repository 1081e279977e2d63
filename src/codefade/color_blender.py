"""Per-character color interpolation between two themes."""

import logging
from typing import List, Sequence

from PySide6.QtGui import QColor

from codefade.code_token import Cluster, DEFAULT_RENDER_COLOR


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def mix_hsl(old_color: str | None, new_color: str | None, progress: float) -> str:
    """
    Mix two colors in HSL space.

    Hue takes the shorter way round the color wheel.  An achromatic color has no hue
    of its own so it takes the other color's hue, which keeps greys from swinging
    through red on the way to a saturated color.

    Args:
        old_color: Color at progress 0
        new_color: Color at progress 1
        progress: Mix amount, 0 gives old_color and 1 gives new_color exactly

    Returns:
        The mixed color as "#rrggbb"
    """
    old_color = old_color or DEFAULT_RENDER_COLOR
    new_color = new_color or DEFAULT_RENDER_COLOR
    if progress <= 0.0:
        return old_color

    if progress >= 1.0:
        return new_color

    old_hue, old_sat, old_light, _ = QColor(old_color).getHslF()
    new_hue, new_sat, new_light, _ = QColor(new_color).getHslF()

    if old_hue < 0 and new_hue < 0:
        old_hue = new_hue = 0.0

    elif old_hue < 0:
        old_hue = new_hue

    elif new_hue < 0:
        new_hue = old_hue

    hue_delta = new_hue - old_hue
    if hue_delta > 0.5:
        hue_delta -= 1.0

    elif hue_delta < -0.5:
        hue_delta += 1.0

    hue = (old_hue + hue_delta * progress) % 1.0
    sat = _clamp(old_sat + (new_sat - old_sat) * progress)
    light = _clamp(old_light + (new_light - old_light) * progress)
    return QColor.fromHslF(hue, sat, light).name()


class ColorBlender:
    """
    Blends the cluster streams produced for two themes.

    Both streams must come from the same text and be segmented identically.  The
    blender doesn't try to reconcile streams that aren't; it logs the first position
    that differs and carries on with the new stream's text.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger("ColorBlender")

    def blend(
        self,
        new_clusters: Sequence[Cluster],
        old_clusters: Sequence[Cluster],
        progress: float | None
    ) -> List[Cluster]:
        """
        Blend two cluster streams.

        Args:
            new_clusters: Clusters for the theme being transitioned to
            old_clusters: Clusters for the theme being transitioned from
            progress: Transition progress in [0, 1], or None when not transitioning

        Returns:
            Clusters with the new stream's text and mixed colors
        """
        if progress is None:
            return list(new_clusters)

        if len(new_clusters) != len(old_clusters):
            self._logger.warning(
                "Cannot align theme transition: %d clusters against %d", len(new_clusters), len(old_clusters)
            )

        blended: List[Cluster] = []
        reported = False
        for i, new_cluster in enumerate(new_clusters):
            if i >= len(old_clusters):
                blended.append(Cluster(text=new_cluster.text, color=new_cluster.color))
                continue

            old_cluster = old_clusters[i]
            if old_cluster.text != new_cluster.text and not reported:
                self._logger.warning(
                    "Theme transition segments differ at cluster %d: %r against %r",
                    i, new_cluster.text, old_cluster.text
                )
                reported = True

            blended.append(Cluster(
                text=new_cluster.text,
                color=mix_hsl(old_cluster.color, new_cluster.color, progress)
            ))

        return blended
