from typing import List, Optional
from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QColor, QMouseEvent, QPainter
from PySide6.QtWidgets import QWidget
from pixelbrush.backend.controller import PixelEditController, PixelTapEvent
from pixelbrush.backend.models.color import Color
from pixelbrush.backend.models.pixel_buffer import PixelCoordinate
from pixelbrush.backend.utils.brush import stamp_offsets
from pixelbrush.backend.utils.coordinates import to_pixel
from pixelbrush.definitions import BRUSH_PREVIEW_COLOR
from pixelbrush.frontend.widgets.pixel_image import PixelImage


class EditablePixelImage(PixelImage):
    """PixelImage that paints with the controller's brush under the left mouse button"""

    ############ SIGNALS ############

    pixel_tapped = Signal(object)  # PixelTapEvent

    def __init__(self, controller: PixelEditController, parent: Optional[QWidget] = None):
        super().__init__(controller, parent)
        self._hover_cell: Optional[PixelCoordinate] = None
        self._preview_color = QColor(*Color.from_string(BRUSH_PREVIEW_COLOR))
        self.setMouseTracking(True)
        self.setCursor(Qt.CursorShape.CrossCursor)

    ############ PUBLIC METHODS ############

    def cell_at(self, pos: QPointF) -> Optional[PixelCoordinate]:
        """Pixel cell under a widget position, None if the image has no area"""
        rect = self.image_rect()
        if rect.width() <= 0 or rect.height() <= 0:
            return None
        return to_pixel(pos.x() - rect.x(), pos.y() - rect.y(), rect.width(), rect.height(),
                        self.controller.width, self.controller.height)

    ############ EVENTS ############

    def mousePressEvent(self, event: QMouseEvent):
        """Start a stroke"""
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        self._dispatch(self.controller.pointer_down, event.position())
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent):
        """Continue the stroke while the left button is held, otherwise track hover"""
        pos = event.position()
        self._set_hover(self.cell_at(pos))

        if event.buttons() & Qt.MouseButton.LeftButton:
            self._dispatch(self.controller.pointer_move, pos)
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent):
        """End the stroke"""
        if event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return
        self.controller.pointer_up()
        event.accept()

    def leaveEvent(self, event):
        self._set_hover(None)
        super().leaveEvent(event)

    def paint_overlay(self, painter: QPainter):
        """Shade the cells the brush would cover at the hovered cell"""
        if self._hover_cell is None:
            return

        rect = self.image_rect()
        cell_w = rect.width() / self.controller.width
        cell_h = rect.height() / self.controller.height

        for dx, dy in stamp_offsets(self.controller.brush_size):
            x = self._hover_cell.x + int(dx)
            y = self._hover_cell.y + int(dy)
            if 0 <= x < self.controller.width and 0 <= y < self.controller.height:
                painter.fillRect(QRectF(rect.x() + x * cell_w, rect.y() + y * cell_h, cell_w, cell_h),
                                 self._preview_color)

    ############ PRIVATE METHODS ############

    def _dispatch(self, handler, pos: QPointF) -> List[PixelTapEvent]:
        """Send a widget position to a controller pointer handler, relative to the image rect"""
        rect = self.image_rect()
        if rect.width() <= 0 or rect.height() <= 0:
            return []

        events = handler(pos.x() - rect.x(), pos.y() - rect.y(), rect.width(), rect.height())
        for tap in events:
            self.pixel_tapped.emit(tap)
        return events

    def _set_hover(self, cell: Optional[PixelCoordinate]):
        if cell != self._hover_cell:
            self._hover_cell = cell
            self.update()
