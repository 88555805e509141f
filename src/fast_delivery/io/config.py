# src/fast_delivery/io/config.py
from pathlib import Path

from fast_delivery.config.models import AppModel


def load_config(path: str | Path) -> AppModel:
    """Read a JSON config file; missing sections fall back to the model defaults."""
    return AppModel.model_validate_json(Path(path).read_text(encoding="utf-8"))
