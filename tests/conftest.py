"""Pytest fixtures for semsearch tests."""

import json
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from semsearch.config import reset_config
from semsearch.config.schema import SemSearchConfig


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def order_records() -> list[dict[str, Any]]:
    """Sample sales orders as shown on the dashboard."""
    return [
        {
            "id": "ORD-1001",
            "client": "Ana López",
            "date": "2024-05-10",
            "amount": "$563",
            "paymentMethod": "QR",
            "status": "Aprobado",
        },
        {
            "id": "ORD-1002",
            "client": "Carlos Pérez",
            "date": "2024-05-11",
            "amount": "$600",
            "paymentMethod": "Kueski Pay",
            "status": "Pendiente",
        },
        {
            "id": "ORD-1003",
            "client": "Beatriz Gómez",
            "date": "2024-05-12",
            "amount": "$1000",
            "paymentMethod": "QR",
            "status": "Rechazado",
        },
    ]


@pytest.fixture
def user_records() -> list[dict[str, Any]]:
    """Sample store users."""
    return [
        {
            "name": "María Fernández",
            "email": "maria@tienda.mx",
            "role": "Administrador",
            "branch": "Sucursal Centro",
            "status": "Activo",
        },
        {
            "name": "Jorge Ruiz",
            "email": "jorge@tienda.mx",
            "role": "Vendedor",
            "branch": "Sucursal Norte",
            "status": "Suspendido",
        },
    ]


@pytest.fixture
def faq_records() -> list[dict[str, Any]]:
    """Sample help center entries."""
    return [
        {
            "title": "¿Cómo crear una orden de pago?",
            "content": "Desde el panel selecciona Nueva orden e ingresa el monto.",
        },
        {
            "title": "¿Qué hago si el código QR expira?",
            "content": "Genera un nuevo código desde el detalle de la orden.",
        },
    ]


@pytest.fixture
def records_file(temp_dir: Path, order_records: list[dict[str, Any]]) -> Path:
    """Write the sample orders to a JSON file."""
    path = temp_dir / "orders.json"
    path.write_text(json.dumps(order_records, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def default_config() -> SemSearchConfig:
    """Get default configuration."""
    return SemSearchConfig()


@pytest.fixture(autouse=True)
def reset_config_fixture() -> Generator[None, None, None]:
    """Reset config singleton between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config_file(temp_dir: Path) -> Path:
    """Create a test config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""
default_preset = "orders"

[search]
min_score = 1.5
fuzzy_threshold = 0.6

[search.score_weights]
status = 2.0

[cache]
phonetic_cache_size = 50

[session]
debounce_ms = 0

[output]
default_format = "plain"
show_scores = true
""")
    return config_path
