"""
Native function descriptors and natives database loading
"""

import json
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class TypeSpec:
    """A C ABI type: base type name, pointer depth and constness"""
    base_type: str
    pointers: int = 0
    is_const: bool = False

    def __post_init__(self):
        if not self.base_type or not self.base_type.strip():
            raise ValueError("TypeSpec requires a non-empty base type")
        if self.pointers < 0:
            raise ValueError(f"Invalid pointer count {self.pointers} for type '{self.base_type}'")


@dataclass(frozen=True)
class NativeParam:
    """A named native parameter"""
    name: str
    type: TypeSpec

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Native parameter requires a non-empty name")


@dataclass(frozen=True)
class NativeDescriptor:
    """Signature and documentation of a single native function"""
    name: str
    hash: str
    return_type: TypeSpec
    params: tuple[NativeParam, ...] = field(default_factory=tuple)
    jhash: str = ""
    build: str | None = None
    comment: str = ""

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError(f"Native {self.hash or '<unknown>'} has an empty name")
        if not self.hash or not self.hash.strip():
            raise ValueError(f"Native '{self.name}' has an empty hash")
        # Accept lists from callers but store an immutable sequence
        object.__setattr__(self, "params", tuple(self.params))


def parse_type(spelling: str) -> TypeSpec:
    """Parse a type spelling like `const char*` into a TypeSpec"""
    if not spelling or not spelling.strip():
        raise ValueError("Cannot parse an empty type spelling")

    pointers = spelling.count("*")
    words = spelling.replace("*", " ").split()
    is_const = "const" in words
    base_words = [w for w in words if w != "const"]
    if not base_words:
        raise ValueError(f"Type spelling '{spelling}' has no base type")

    return TypeSpec(" ".join(base_words), pointers, is_const)


def _native_from_record(native_hash: str, record: dict) -> NativeDescriptor:
    params = [
        NativeParam(param.get("name", ""), parse_type(param.get("type", "")))
        for param in record.get("params", [])
    ]
    build = record.get("build")
    return NativeDescriptor(
        name=record.get("name", ""),
        hash=native_hash,
        jhash=record.get("jhash", "") or "",
        build=str(build) if build else None,
        return_type=parse_type(record.get("return_type", "void")),
        params=tuple(params),
        comment=record.get("comment", "") or "",
    )


def natives_from_dict(data: dict) -> dict[str, list[NativeDescriptor]]:
    """Convert a natives database mapping into descriptors grouped by namespace"""
    if not isinstance(data, dict):
        raise ValueError("Natives database must be an object of namespaces")

    natives = {}
    for namespace, entries in data.items():
        if not isinstance(namespace, str) or not namespace.strip():
            raise ValueError(f"Invalid namespace name {namespace!r}")
        if not isinstance(entries, dict):
            raise ValueError(f"Namespace '{namespace}' must map hashes to natives")
        descriptors = []
        for native_hash, record in entries.items():
            try:
                descriptors.append(_native_from_record(native_hash, record))
            except (ValueError, AttributeError, TypeError) as e:
                raise ValueError(f"Invalid native {namespace}::{native_hash}: {e}")
        natives[namespace] = descriptors
    return natives


def load_natives(natives_path) -> dict[str, list[NativeDescriptor]]:
    """Load a natives JSON database file"""
    path = Path(natives_path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"JSON parsing error in {path}: {e}")
    except FileNotFoundError:
        raise FileNotFoundError(f"Natives file not found: {natives_path}")
    return natives_from_dict(data)
