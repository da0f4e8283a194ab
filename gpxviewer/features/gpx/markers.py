"""
Marker Content Builder

Descriptive marker content for points, and the icon size table.
"""

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple

from .models import Waypoint

POINT_LABELS = {
    "wpt": "Waypoint",
    "trkpt": "Track Point",
    "rtept": "Route Point",
}

DEFAULT_SIZE_CLASS = 6


@dataclass(frozen=True)
class IconSpec:
    """Marker icon asset with pixel size, anchor and origin."""
    name: str
    width: int
    height: int
    anchor: Tuple[int, int]
    origin: Tuple[int, int] = (0, 0)

    def url(self, base_path: str) -> str:
        return f"{base_path.rstrip('/')}/{self.name}"


def _triangle(width: int, height: int, anchor_x: int, anchor_y: int) -> IconSpec:
    return IconSpec(
        name=f"red_triangle_{width}x{height}.png",
        width=width,
        height=height,
        anchor=(anchor_x, anchor_y),
    )


# Size class -> icon
DEFAULT_ICON_SIZES: Dict[int, IconSpec] = {
    10: _triangle(80, 72, 40, 36),
    9: _triangle(70, 63, 35, 33),
    8: _triangle(60, 54, 30, 27),
    7: _triangle(50, 45, 25, 23),
    6: _triangle(40, 36, 20, 18),
    5: _triangle(30, 27, 15, 19),
    4: _triangle(26, 23, 18, 12),
    3: _triangle(20, 18, 10, 9),
    2: _triangle(14, 13, 7, 7),
    1: _triangle(8, 7, 4, 4),
}


def translate_name(tag: str) -> Optional[str]:
    """Human label for a GPX point element name, None if unknown."""
    return POINT_LABELS.get(tag)


class MarkerContentBuilder:
    """
    Builds marker content and selects marker icons.

    Usage:
        builder = MarkerContentBuilder(size_class=settings.marker_size_class)
        content = builder.content(waypoint)
        icon = builder.icon()
    """

    def __init__(
        self,
        icons: Optional[Mapping[int, IconSpec]] = None,
        size_class: Optional[int] = DEFAULT_SIZE_CLASS
    ):
        self.icons = dict(icons if icons is not None else DEFAULT_ICON_SIZES)
        if DEFAULT_SIZE_CLASS not in self.icons:
            raise ValueError(f"Icon table must define size class {DEFAULT_SIZE_CLASS}")
        self.size_class = size_class

    def content(self, point: Waypoint) -> str:
        """
        Marker content for a point.

        Embedded content is used verbatim. Otherwise the content is the
        type label followed by 'name = value' lines for each attribute
        and each non-empty child element, in document order.
        """
        if point.content is not None:
            return point.content

        lines = []
        label = translate_name(point.tag)
        if label:
            lines.append(label)
        lines.extend(f"{name} = {value}" for name, value in point.attributes)
        lines.extend(f"{tag} = {value}" for tag, value in point.children)
        return "\n".join(lines)

    def icon(self, size_class: Optional[int] = None) -> IconSpec:
        """Icon for a size class; unset or unknown classes use class 6."""
        size = self.size_class if size_class is None else size_class
        if size not in self.icons:
            size = DEFAULT_SIZE_CLASS
        return self.icons[size]
