from .layout_fit_tool import LayoutFitTool

__all__ = [
    "LayoutFitTool",
]
