"""Layout space description for draggable elements."""
from dataclasses import dataclass

from .transform import Rect, Vec2

ORIGIN_TOP_LEFT = 'top_left'
ORIGIN_VIEWPORT_CENTER = 'viewport_center'


@dataclass(frozen=True)
class AnchorConvention:
    """Layout space of a draggable element.

    Attributes:
        name: Readable identifier
        origin: ORIGIN_TOP_LEFT or ORIGIN_VIEWPORT_CENTER
        axis_sign: Per-axis sign relative to pointer space (Y is -1 for Y-up spaces)
        anchor: Anchor point as a fraction of the element size measured from
            the rectangle's minimum corner ((0, 0) corner, (0.5, 0.5) center)
    """
    name: str
    origin: str
    axis_sign: Vec2
    anchor: Vec2

    def origin_point(self, viewport: Vec2) -> Vec2:
        """Pointer-space position of this space's origin."""
        if self.origin == ORIGIN_VIEWPORT_CENTER:
            return viewport * 0.5
        return Vec2.zero()

    def rect_around(self, anchor: Vec2, size: Vec2) -> Rect:
        """Rectangle in this space for an element anchored at ``anchor``."""
        return Rect(anchor - size * self.anchor, size)
