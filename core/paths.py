from pathlib import Path

def resolve_data_file(name: str) -> Path:
    """Busca el libro en las carpetas conocidas; si no existe, devuelve la primera candidata."""
    p = Path(name)
    if p.is_absolute():
        return p
    candidates = [
        Path.cwd() / p,
        Path(__file__).parent.parent / p,
        Path(__file__).parent.parent / "public" / p.name,
    ]
    for c in candidates:
        if c.exists():
            return c
    return candidates[0]
