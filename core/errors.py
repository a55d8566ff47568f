from __future__ import annotations


class DashboardError(Exception):
    """Error base del dashboard."""


class DataLoadError(DashboardError):
    """No se pudo leer el libro de recomendaciones (archivo, red o formato)."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")
