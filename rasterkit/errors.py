from __future__ import annotations


class CanvasConfigError(ValueError):
    pass
