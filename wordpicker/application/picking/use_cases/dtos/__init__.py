from .panel_dtos import PanelView, PanelWordView

__all__ = ["PanelView", "PanelWordView"]
