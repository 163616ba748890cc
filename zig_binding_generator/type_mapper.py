"""
Type mapping logic for converting native C ABI types to Zig types
"""

from .constants import ZIG_TYPE_MAP, NATIVE_TYPE_MAP, VECTOR_COMPONENTS, POINTER_MARKER
from .naming import transform_param_name
from .natives import NativeParam, TypeSpec


class TypeMapper:
    """Maps native type names to Zig types"""

    def __init__(self, use_native_types: bool = False):
        self.use_native_types = use_native_types
        self.type_map = ZIG_TYPE_MAP.copy()
        self.native_type_map = NATIVE_TYPE_MAP.copy()

    def map_base_type(self, name: str) -> str:
        """Map a C ABI type name to its Zig spelling, unknown names pass through"""
        return self.type_map.get(name, name)

    def transform_base_type(self, name: str) -> str:
        """Substitute host ABI integer types for RAGE handles when native types are enabled"""
        if not self.use_native_types:
            return name
        return self.native_type_map.get(name, name)

    def format_type(self, type_spec: TypeSpec) -> str:
        """Format a full Zig type with C pointers and constness"""
        zig_type = self.map_base_type(self.transform_base_type(type_spec.base_type))
        pointers = POINTER_MARKER * type_spec.pointers

        # A const non-pointer isn't valid in Zig
        if type_spec.is_const and type_spec.pointers:
            return f"{pointers}const {zig_type}"

        return f"{pointers}{zig_type}"

    def format_invoke_param(self, param: NativeParam, zig_compliant: bool = True) -> str:
        """Format a parameter as passed to the invoker

        Vectors passed by value are split into their components.
        """
        name = transform_param_name(param.name, zig_compliant)

        if not param.type.pointers and param.type.base_type in VECTOR_COMPONENTS:
            return ", ".join(f"{name}.{c}" for c in VECTOR_COMPONENTS[param.type.base_type])

        return name
