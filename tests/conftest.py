"""Configuração do pytest para o projeto Pyloto Proxy Bot."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

# Adiciona src/ e scripts/ ao PYTHONPATH para permitir imports absolutos
_root = Path(__file__).parent.parent
for _path in (_root / "src", _root / "scripts"):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))


class InteractionSigner:
    """Assina corpos de interação como a plataforma faz."""

    def __init__(self) -> None:
        self._private_key = Ed25519PrivateKey.generate()
        self.public_key_hex = (
            self._private_key.public_key()
            .public_bytes(Encoding.Raw, PublicFormat.Raw)
            .hex()
        )

    def sign(self, body: bytes, timestamp: str = "1700000000") -> dict[str, str]:
        signature = self._private_key.sign(timestamp.encode("utf-8") + body)
        return {
            "x-signature-ed25519": signature.hex(),
            "x-signature-timestamp": timestamp,
        }


@pytest.fixture
def signer() -> InteractionSigner:
    return InteractionSigner()


@pytest.fixture
def other_signer() -> InteractionSigner:
    return InteractionSigner()
