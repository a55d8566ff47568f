# services/sources.py
"""
Orígenes de datos del libro de recomendaciones.

Cada origen expone `load_frame() -> pd.DataFrame` con las columnas tal como
vienen en la primera hoja; cualquier falla se reporta como DataLoadError.
"""
from __future__ import annotations
import io
from pathlib import Path
from typing import Protocol

import pandas as pd
import requests

from core.errors import DataLoadError
from core.paths import resolve_data_file

class DataSource(Protocol):
    description: str

    def load_frame(self) -> pd.DataFrame: ...

def _read_first_sheet(buf, source: str) -> pd.DataFrame:
    try:
        return pd.read_excel(buf, sheet_name=0)
    except Exception as e:
        raise DataLoadError(source, f"libro ilegible ({e})") from e

class ExcelFileSource:
    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.description = str(self.path)

    def load_frame(self) -> pd.DataFrame:
        if not self.path.exists():
            raise DataLoadError(self.description, "archivo no encontrado")
        return _read_first_sheet(self.path, self.description)

class HttpWorkbookSource:
    def __init__(self, url: str, timeout: float = 10.0):
        self.url = url
        self.timeout = timeout
        self.description = url

    def load_frame(self) -> pd.DataFrame:
        try:
            r = requests.get(self.url, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            raise DataLoadError(self.description, str(e)) from e
        return _read_first_sheet(io.BytesIO(r.content), self.description)

class FrameSource:
    """Origen en memoria (pruebas y datos ya cargados)."""

    def __init__(self, df: pd.DataFrame, description: str = "memoria"):
        self.df = df
        self.description = description

    def load_frame(self) -> pd.DataFrame:
        return self.df.copy()

def source_from_setting(value: str, timeout: float = 10.0) -> DataSource:
    if value.strip().startswith(("http://", "https://")):
        return HttpWorkbookSource(value.strip(), timeout=timeout)
    return ExcelFileSource(resolve_data_file(value))
