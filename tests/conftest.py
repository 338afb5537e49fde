"""
Test Configuration
==================

Pytest fixtures and test configuration for wsframe-inspector.
"""

import pytest


@pytest.fixture
def abc_frame_bytes():
    """Masked Text frame carrying 'abc' (base64: gYNaDpE2O2zy)."""
    return bytes.fromhex("81835a0e91363b6cf2")


@pytest.fixture
def masking_key():
    """Masking key used by build_frame_bytes."""
    return bytes([0x37, 0xFA, 0x21, 0x3D])


@pytest.fixture
def build_frame_bytes(masking_key):
    """
    Provide a factory that assembles masked frame bytes.

    The length code follows the RFC rule unless length_code is given, so
    tests can build non-canonical Medium/Long frames for small payloads.
    """

    def _build(
        payload: bytes,
        opcode: int = 0x1,
        fin: bool = True,
        length_code=None,
        key: bytes = masking_key,
    ) -> bytes:
        if length_code is None:
            if len(payload) <= 125:
                length_code = len(payload)
            elif len(payload) <= 0xFFFF:
                length_code = 126
            else:
                length_code = 127

        first = (0x80 if fin else 0x00) | opcode
        header = bytes([first, 0x80 | length_code])
        if length_code == 126:
            header += len(payload).to_bytes(2, "big")
        elif length_code == 127:
            header += len(payload).to_bytes(8, "big")

        masked = bytes(byte ^ key[i % 4] for i, byte in enumerate(payload))
        return header + key + masked

    return _build


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """
    Run with no config file in reach and no WSFRAME_* / NO_COLOR variables.

    Returns the temporary working directory.
    """
    for name in (
        "WSFRAME_INPUT_FORMAT",
        "WSFRAME_THEME",
        "WSFRAME_COLOR",
        "WSFRAME_LOG_LEVEL",
        "NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    return tmp_path
