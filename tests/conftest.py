"""
Pytest configuration and fixtures
"""

import json
from datetime import datetime

import pytest

from zig_binding_generator.code_generators import GenerationContext
from zig_binding_generator.natives import NativeDescriptor, NativeParam, TypeSpec


SAMPLE_NATIVES = {
    "ENTITY": {
        "0x3FEF770D40960D5A": {
            "name": "GET_ENTITY_COORDS",
            "jhash": "0x1647F1CB",
            "comment": "Gets the current coordinates for a specified entity.\n`entity` = The entity to get the coordinates from.",
            "params": [
                {"type": "Entity", "name": "entity"},
                {"type": "BOOL", "name": "alive"}
            ],
            "return_type": "Vector3",
            "build": "323"
        },
        "0x06843DA7060A026B": {
            "name": "SET_ENTITY_COORDS",
            "jhash": "0xDF70B41B",
            "comment": "",
            "params": [
                {"type": "Entity", "name": "entity"},
                {"type": "Vector3", "name": "pos"},
                {"type": "BOOL", "name": "clearArea"}
            ],
            "return_type": "void",
            "build": "323"
        }
    },
    "PLAYER": {
        "0x6D0DE6A7B5DA71F8": {
            "name": "GET_PLAYER_NAME",
            "jhash": "0x406B4B20",
            "comment": "",
            "params": [
                {"type": "Player", "name": "player"}
            ],
            "return_type": "const char*",
            "build": "323"
        }
    },
    "EMPTY": {}
}


@pytest.fixture
def temp_dir(tmp_path):
    """Directory for generated files"""
    return tmp_path


@pytest.fixture
def natives_file(tmp_path):
    """Write the sample natives database to a JSON file"""
    path = tmp_path / "natives.json"
    path.write_text(json.dumps(SAMPLE_NATIVES), encoding="utf-8")
    return path


@pytest.fixture
def context():
    """Fixed generation context so the header is deterministic"""
    return GenerationContext(datetime(2024, 1, 2, 3, 4, 5), "https://nativedb.example")


@pytest.fixture
def coords_native():
    """The GET_ENTITY_COORDS native as a descriptor"""
    return NativeDescriptor(
        name="GET_ENTITY_COORDS",
        hash="0x3FEF770D40960D5A",
        jhash="0x1647F1CB",
        build="323",
        return_type=TypeSpec("Vector3"),
        params=(
            NativeParam("entity", TypeSpec("Entity")),
            NativeParam("alive", TypeSpec("BOOL")),
        ),
        comment="Gets the coords.\nOf an entity.",
    )
