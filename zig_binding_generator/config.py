"""
Generator settings and XML configuration file parsing for Zig bindings generator
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .constants import (
    DEFAULT_INCLUDES,
    DEFAULT_INVOKE_FUNCTION,
    INDENTATION_OPTIONS,
    LINE_ENDINGS,
)


@dataclass(frozen=True)
class GeneratorSettings:
    """Options for one Zig bindings generation run"""
    indentation: str = "    "
    line_ending: str = "lf"
    includes: str = DEFAULT_INCLUDES
    invoke_function: str = DEFAULT_INVOKE_FUNCTION
    generate_comments: bool = True
    include_ndb_links: bool = False
    use_native_types: bool = False
    one_line_functions: bool = True
    zig_compliant: bool = True

    def validate(self) -> "GeneratorSettings":
        if self.indentation not in INDENTATION_OPTIONS:
            raise ValueError(f"Invalid indentation {self.indentation!r}. Must be 1, 2, 4 or 8 spaces.")
        if self.line_ending not in LINE_ENDINGS:
            raise ValueError(f"Invalid line ending '{self.line_ending}'. Must be 'lf' or 'crlf'.")
        if not self.invoke_function:
            raise ValueError("Invoke function name cannot be empty")
        return self


@dataclass
class BindingConfig:
    """Configuration for Zig bindings generation"""
    settings: GeneratorSettings = field(default_factory=GeneratorSettings)
    namespaces: list[str] = field(default_factory=list)


BOOLEAN_ATTRIBUTES = (
    "generate_comments",
    "include_ndb_links",
    "use_native_types",
    "one_line_functions",
    "zig_compliant",
)


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise ValueError(f"Invalid value '{value}' for '{name}'. Must be 'true' or 'false'.")


def parse_config_file(config_path):
    """Parse XML configuration file and return BindingConfig object"""
    try:
        tree = ET.parse(config_path)
        root = tree.getroot()

        if root.tag != "bindings":
            raise ValueError(f"Expected root element 'bindings', got '{root.tag}'")

        options = {}

        # Indentation is given as a number of spaces
        indentation = root.get("indentation")
        if indentation is not None:
            try:
                options["indentation"] = " " * int(indentation.strip())
            except ValueError:
                raise ValueError(f"Invalid indentation '{indentation}'. Must be a number of spaces.")

        line_ending = root.get("line_ending")
        if line_ending is not None:
            options["line_ending"] = line_ending.strip().lower()

        invoke_function = root.get("invoke_function")
        if invoke_function is not None:
            options["invoke_function"] = invoke_function.strip()

        for name in BOOLEAN_ATTRIBUTES:
            value = root.get(name)
            if value is not None:
                options[name] = _parse_bool(name, value)

        # Includes replace the default imports when present
        includes = []
        for include in root.findall("include"):
            text = include.get("text", include.text)
            if not text or not text.strip():
                raise ValueError("Include element missing 'text' attribute")
            includes.append(text.strip())
        if includes:
            options["includes"] = "\n".join(includes)

        namespaces = []
        for namespace in root.findall("namespace"):
            name = namespace.get("name")
            if not name:
                raise ValueError("Namespace element missing 'name' attribute")
            namespaces.append(name.strip())

        settings = GeneratorSettings(**options).validate()
        return BindingConfig(settings=settings, namespaces=namespaces)

    except ET.ParseError as e:
        raise ValueError(f"XML parsing error: {e}")
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
