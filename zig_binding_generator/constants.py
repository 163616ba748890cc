"""
Constants and mappings for Zig bindings generation
"""


# Mapping from C ABI / Windows / RAGE type names to Zig types
ZIG_TYPE_MAP = {
    # Fixed-width types
    "int8_t": "i8",
    "uint8_t": "u8",
    "int16_t": "i16",
    "uint16_t": "u16",
    "int32_t": "i32",
    "uint32_t": "u32",
    "int64_t": "i64",
    "uint64_t": "u64",
    "__int128": "i128",
    "signed __int128": "i128",
    "unsigned __int128": "u128",
    # Basic types, Zig uses u8 for char
    "char": "u8",
    "signed char": "u8",
    "unsigned char": "u8",
    "short": "c_short",
    "signed short": "c_short",
    "unsigned short": "c_ushort",
    "int": "c_int",
    "signed int": "c_int",
    "unsigned int": "c_uint",
    "long": "c_long",
    "signed long": "c_long",
    "unsigned long": "c_ulong",
    "long long": "c_longlong",
    "signed long long": "c_longlong",
    "unsigned long long": "c_ulonglong",
    # Pointer-sized integers
    "intptr_t": "isize",
    "uintptr_t": "usize",
    # Floating-point types
    "long double": "c_longdouble",
    "_Float16": "f16",
    "float": "f32",
    "double": "f64",
    "_Float128": "f128",
}

# Windows API types, resolved through `const windows = @import("std").os.windows;`
WINDOWS_TYPES = ["BOOL", "BYTE", "WORD", "HANDLE", "HMODULE", "DWORD"]

# RAGE handle and vector types, resolved through the user's `types` import
RAGE_TYPES = [
    "Void", "Any", "uint", "Hash", "Blip", "Cam", "Camera", "CarGenerator",
    "ColourIndex", "CoverPoint", "Entity", "FireId", "Group", "Interior",
    "Object", "Ped", "Pickup", "Player", "ScrHandle", "Sphere", "TaskSequence",
    "Texture", "TextureDict", "Train", "Vehicle", "Weapon",
    "Vector2", "Vector3", "Vector4",
]

ZIG_TYPE_MAP.update({name: f"windows.{name}" for name in WINDOWS_TYPES})
ZIG_TYPE_MAP.update({name: f"types.{name}" for name in RAGE_TYPES})

# Host ABI substitutions applied when native types are requested
NATIVE_TYPE_MAP = {
    "Void": "windows.DWORD",
    "Any": "windows.DWORD",
    "uint": "windows.DWORD",
    "Hash": "windows.DWORD",
}
NATIVE_TYPE_MAP.update({
    name: "c_int"
    for name in RAGE_TYPES
    if name not in NATIVE_TYPE_MAP and not name.startswith("Vector")
})

# Zig keywords, plus `type` which is a primitive that cannot be shadowed
ZIG_KEYWORDS = frozenset({
    "addrspace", "align", "allowzero", "and", "anyframe", "anytype", "asm",
    "async", "await", "break", "callconv", "catch", "comptime", "const",
    "continue", "defer", "else", "enum", "errdefer", "error", "export",
    "extern", "fn", "for", "if", "inline", "linksection", "noalias",
    "noinline", "nosuspend", "opaque", "or", "orelse", "packed", "pub",
    "resume", "return", "struct", "suspend", "switch", "test", "threadlocal",
    "try", "type", "union", "unreachable", "usingnamespace", "var",
    "volatile", "while",
})

# Vector types passed to the invoker as their scalar components
VECTOR_COMPONENTS = {
    "Vector2": ("x", "y"),
    "Vector3": ("x", "y", "z"),
    "Vector4": ("x", "y", "z", "w"),
}

ZIG_VOID = "void"
POINTER_MARKER = "[*c]"
HEX_NAME_PREFIX = "_0x"

INDENTATION_OPTIONS = (" ", "  ", "    ", "        ")
LINE_ENDINGS = {
    "lf": "\n",
    "crlf": "\r\n",
}

DEFAULT_INCLUDES = 'const invoker = @import("invoker.zig");\nconst types = @import("types.zig");'
DEFAULT_INVOKE_FUNCTION = "invoke"
DEFAULT_ORIGIN = "https://nativedb.dotindustries.dev"

INVOKER_SIGNATURE = "`pub inline fn invoke(comptime R: type, hash: u64, args: anytype) R { ... }`"
WINDOWS_IMPORT = 'const windows = @import("std").os.windows;'
