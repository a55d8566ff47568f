import logging

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def setup_logging(level: str = "info") -> None:
    """Configura el logger raíz una sola vez (Streamlit re-ejecuta el script en cada interacción)."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if not root.handlers:
        logging.basicConfig(format=_FORMAT)
