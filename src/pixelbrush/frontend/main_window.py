import logging
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QMainWindow, QVBoxLayout, QWidget
from pixelbrush.backend.controller import PixelEditController, PixelTapEvent
from pixelbrush.backend.models.color import Color
from pixelbrush.definitions import MAX_BRUSH_SIZE, MIN_BRUSH_SIZE
from pixelbrush.frontend.widgets.editable_pixel_image import EditablePixelImage


class MainWindow(QMainWindow):
    """
    Demo window hosting a single editable pixel image
    """

    def __init__(self, controller: PixelEditController, background: Color):
        super().__init__()
        self.logger = logging.getLogger(self.__class__.__name__)

        self._controller = controller
        self._background = background
        self.canvas: EditablePixelImage = None

        self._init_ui()

    ############ PROPERTIES ############

    @property
    def controller(self) -> PixelEditController:
        return self._controller

    ############ UI ############

    def _init_ui(self):
        """Initialize main window UI"""
        self.setWindowTitle("pixelbrush")

        central = QWidget()
        central.setStyleSheet("background-color: black;")
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(10, 10, 10, 10)

        self.canvas = EditablePixelImage(self._controller)
        self.canvas.pixel_tapped.connect(self._on_pixel_tapped)
        main_layout.addWidget(self.canvas, 1)

        self._create_actions()
        self._show_brush_status()

    def _create_actions(self):
        """Keyboard shortcuts for brush size and clearing"""
        action_shrink = QAction("Smaller Brush", self)
        action_shrink.setShortcut(QKeySequence("["))
        action_shrink.triggered.connect(lambda: self.change_brush_size(-1))
        self.addAction(action_shrink)

        action_grow = QAction("Larger Brush", self)
        action_grow.setShortcut(QKeySequence("]"))
        action_grow.triggered.connect(lambda: self.change_brush_size(1))
        self.addAction(action_grow)

        action_clear = QAction("Clear", self)
        action_clear.setShortcut(QKeySequence.StandardKey.New)
        action_clear.triggered.connect(self.clear)
        self.addAction(action_clear)

    ############ PUBLIC METHODS ############

    def change_brush_size(self, step: int):
        size = max(MIN_BRUSH_SIZE, min(MAX_BRUSH_SIZE, self._controller.brush_size + step))
        self._controller.set_brush(size=size)
        self.canvas.update()
        self._show_brush_status()

    def clear(self):
        """Fill the whole image with the background colour"""
        self._controller.fill(self._background)
        self.logger.info("Canvas cleared")
        self.statusBar().showMessage("Cleared")

    ############ PRIVATE METHODS ############

    def _on_pixel_tapped(self, event: PixelTapEvent):
        self.statusBar().showMessage(
            f"Pixel ({event.x}, {event.y}) | index {event.index} | brush {self._controller.brush_size}"
        )

    def _show_brush_status(self):
        self.statusBar().showMessage(
            f"Brush {self._controller.brush_size}px {self._controller.brush_color.to_hex()}"
        )
