"""
Zig Bindings Generator - Generate Zig native wrappers from a natives database
"""

from .generator import ZigBindingsGenerator
from .type_mapper import TypeMapper
from .line_writer import LineWriter
from .code_generators import GenerationContext, ZigCodeGenerator
from .config import BindingConfig, GeneratorSettings, parse_config_file
from .natives import NativeDescriptor, NativeParam, TypeSpec, load_natives, parse_type
from .constants import (
    ZIG_TYPE_MAP,
    NATIVE_TYPE_MAP,
    ZIG_KEYWORDS,
    DEFAULT_ORIGIN,
)

__version__ = "0.1.0"

__all__ = [
    "ZigBindingsGenerator",
    "TypeMapper",
    "LineWriter",
    "GenerationContext",
    "ZigCodeGenerator",
    "BindingConfig",
    "GeneratorSettings",
    "parse_config_file",
    "NativeDescriptor",
    "NativeParam",
    "TypeSpec",
    "load_natives",
    "parse_type",
    "ZIG_TYPE_MAP",
    "NATIVE_TYPE_MAP",
    "ZIG_KEYWORDS",
    "DEFAULT_ORIGIN",
]
