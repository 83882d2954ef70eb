import logging
import numpy as np
from typing import Optional
from PySide6.QtCore import QRectF, QSize
from PySide6.QtGui import QImage, QPainter, QPaintEvent
from PySide6.QtWidgets import QSizePolicy, QWidget
from pixelbrush.backend.controller import PixelEditController, PixelImageValue
from pixelbrush.definitions import CHANNELS


class PixelImage(QWidget):
    """
    Passive view of a PixelEditController's image.

    The raster is scaled with nearest-neighbour sampling into the largest
    rectangle that fits the widget at the image's aspect ratio, centered.
    The widget repaints whenever the controller publishes a new value.
    """

    def __init__(self, controller: PixelEditController, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.logger = logging.getLogger(self.__class__.__name__)

        self.controller = controller
        self._qimage: Optional[QImage] = None
        self._qimage_dirty = True

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(controller.width, controller.height)

        self._listener = self._on_value_changed
        controller.add_listener(self._listener)
        # The slot must not touch self, the C++ side is already gone
        listener = self._listener
        self.destroyed.connect(lambda *_: controller.remove_listener(listener))

    ############ PROPERTIES ############

    @property
    def qimage(self) -> QImage:
        """Current image as an RGBA QImage, rebuilt lazily after changes"""
        if self._qimage_dirty or self._qimage is None:
            self._qimage = self.value_to_qimage(self.controller.value)
            self._qimage_dirty = False
        return self._qimage

    ############ PUBLIC METHODS ############

    def image_rect(self) -> QRectF:
        """Widget-space rectangle the raster is drawn into"""
        w, h = self.width(), self.height()
        aspect = self.controller.width / self.controller.height

        if w / max(h, 1) > aspect:
            draw_h = float(h)
            draw_w = h * aspect
        else:
            draw_w = float(w)
            draw_h = w / aspect

        return QRectF((w - draw_w) / 2, (h - draw_h) / 2, draw_w, draw_h)

    def detach(self):
        """Stop listening to the controller"""
        self.controller.remove_listener(self._listener)

    @staticmethod
    def value_to_qimage(value: PixelImageValue) -> QImage:
        """Convert a snapshot to QImage, quantizing through its palette if it has one"""
        rgba = np.frombuffer(value.pixels, dtype=np.uint8).reshape(value.height, value.width, CHANNELS)
        if value.palette is not None:
            rgba = value.palette.quantize(rgba)

        bytes_per_line = CHANNELS * value.width
        # QImage does not copy the bytes it is built from
        q_img = QImage(rgba.tobytes(), value.width, value.height, bytes_per_line,
                       QImage.Format.Format_RGBA8888)
        return q_img.copy()

    def sizeHint(self) -> QSize:
        return QSize(self.controller.width * 8, self.controller.height * 8)

    ############ EVENTS ############

    def paintEvent(self, event: QPaintEvent):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, False)
        painter.drawImage(self.image_rect(), self.qimage)
        self.paint_overlay(painter)
        painter.end()

    def paint_overlay(self, painter: QPainter):
        """Hook for subclasses to draw on top of the image"""
        pass

    ############ PRIVATE METHODS ############

    def _on_value_changed(self, value: PixelImageValue):
        self._qimage_dirty = True
        self.update()
