"""
Identifier transformations for Zig bindings
"""

from .constants import ZIG_KEYWORDS, HEX_NAME_PREFIX


def camel_case(name: str) -> str:
    """Convert SNAKE_CASE or snake_case to camelCase"""
    first, *rest = name.lower().split("_")
    return first + "".join(part[:1].upper() + part[1:] for part in rest)


def snake_case(name: str) -> str:
    """Convert camelCase to snake_case, leaving the first character unprefixed"""
    if not name:
        return name
    chars = [name[0].lower()]
    for c in name[1:]:
        if c.isupper():
            chars.append(f"_{c.lower()}")
        else:
            chars.append(c)
    return "".join(chars)


def escape_keyword(name: str) -> str:
    """Escape Zig keywords with the @"..." identifier syntax"""
    if name in ZIG_KEYWORDS:
        return f'@"{name}"'
    return name


def transform_native_name(name: str, zig_compliant: bool = True) -> str:
    """Transform a native's name into a Zig function name

    Names like `_0x1A2B` are not valid identifiers and get quoted, other
    names with a leading underscore move it to the end.
    """
    if name.startswith(HEX_NAME_PREFIX):
        n = f'@"{name[1:]}"'
    elif name.startswith("_"):
        stripped = name[1:]
        n = f"{camel_case(stripped) if zig_compliant else stripped}_"
    else:
        n = camel_case(name) if zig_compliant else name
    return escape_keyword(n)


def transform_param_name(name: str, zig_compliant: bool = True) -> str:
    """Transform a native parameter name into a Zig parameter name"""
    n = snake_case(name) if zig_compliant else name
    return escape_keyword(n)


def transform_namespace_name(name: str, zig_compliant: bool = True) -> str:
    """Transform a namespace (PLAYER, ENTITY, ...) into a Zig container name"""
    n = name.lower() if zig_compliant else name
    return n[:1].upper() + n[1:]
