"""
Code generation functions for Zig bindings
"""

from dataclasses import dataclass
from datetime import datetime

from .config import GeneratorSettings
from .constants import DEFAULT_ORIGIN, INVOKER_SIGNATURE, WINDOWS_IMPORT, ZIG_VOID
from .line_writer import LineWriter
from .naming import transform_namespace_name, transform_native_name, transform_param_name
from .natives import NativeDescriptor
from .type_mapper import TypeMapper


@dataclass(frozen=True)
class GenerationContext:
    """Where and when a generation run happens"""
    timestamp: datetime
    origin: str = DEFAULT_ORIGIN

    @classmethod
    def now(cls, origin: str = DEFAULT_ORIGIN) -> "GenerationContext":
        return cls(datetime.now(), origin)

    def native_link(self, native_hash: str) -> str:
        return f"{self.origin}/natives/{native_hash}"


def format_doc_comment(comment: str, indentation: str) -> str:
    """Prepare a native comment for Zig doc comments

    Tabs are replaced by the indentation, and a trailing backslash joins
    consecutive text lines. Indented lines are left as they are.
    """
    lines = comment.replace("\r\n", "\n").replace("\t", indentation).split("\n")
    for i in range(1, len(lines)):
        previous = lines[i - 1]
        if lines[i].strip() and previous.strip() and not previous.startswith("  "):
            lines[i - 1] = f"{previous} \\"
    return "\n".join(lines)


class ZigCodeGenerator:
    """Generates Zig code for natives"""

    DOC_PREFIX = "///"
    NAMESPACE_CLOSING = "};"

    def __init__(self, settings: GeneratorSettings | None = None, writer: LineWriter | None = None):
        self.settings = (settings or GeneratorSettings()).validate()
        self.type_mapper = TypeMapper(self.settings.use_native_types)
        self.writer = writer or LineWriter(self.settings.indentation, self.settings.line_ending)
        self.context = None

    def start(self, context: GenerationContext | None = None) -> "ZigCodeGenerator":
        """Write the file header, includes and disable zig fmt"""
        self.context = context or GenerationContext.now()
        (self.writer
            .write_comment(f"Generated on {self.context.timestamp.strftime('%Y-%m-%d %H:%M:%S')}")
            .write_comment(self.context.origin)
            .write_blank_line()
            .write_comment("Expected invoker signature:")
            .write_comment(INVOKER_SIGNATURE)
            .write_blank_line()
            .write_line(WINDOWS_IMPORT)
            .write_blank_line()
            .write_line(self.settings.includes)
            .write_blank_line()
            .write_line("// zig fmt: off")
            .write_blank_line())
        return self

    def end(self) -> "ZigCodeGenerator":
        """Re-enable zig fmt"""
        self.writer.write_line("// zig fmt: on").write_blank_line()
        return self

    def generate_signature(self, native: NativeDescriptor) -> str:
        """Generate the `pub fn` line for a native"""
        zig_compliant = self.settings.zig_compliant
        name = transform_native_name(native.name, zig_compliant)
        params = ", ".join(
            f"{transform_param_name(p.name, zig_compliant)}: {self.type_mapper.format_type(p.type)}"
            for p in native.params
        )
        return_type = self.type_mapper.format_type(native.return_type)
        return f"pub fn {name}({params}) {return_type}"

    def generate_invoke(self, native: NativeDescriptor) -> str:
        """Generate the invoker call forming the function body"""
        return_type = self.type_mapper.format_type(native.return_type)
        return_keyword = "" if return_type == ZIG_VOID else "return "
        args = ", ".join(
            self.type_mapper.format_invoke_param(p, self.settings.zig_compliant)
            for p in native.params
        )
        return f"{return_keyword}invoker.{self.settings.invoke_function}({return_type}, {native.hash}, .{{{args}}});"

    @staticmethod
    def generate_metadata_comment(native: NativeDescriptor) -> str:
        parts = [native.hash]
        if native.jhash:
            parts.append(native.jhash)
        if native.build:
            parts.append(f"b{native.build}")
        return " ".join(parts)

    def add_native(self, native: NativeDescriptor) -> "ZigCodeGenerator":
        """Write one native as a Zig function"""
        settings = self.settings
        context = self.context or GenerationContext.now()

        if settings.generate_comments and native.comment:
            comment = format_doc_comment(native.comment, settings.indentation)
            self.writer.write_comment(comment, self.DOC_PREFIX)
        if settings.generate_comments and settings.include_ndb_links and native.comment:
            self.writer.write_comment("", self.DOC_PREFIX)
        if settings.include_ndb_links:
            self.writer.write_comment(context.native_link(native.hash), self.DOC_PREFIX)

        (self.writer
            .write_line(self.generate_signature(native))
            .push_block(settings.one_line_functions)
            .write_line(self.generate_invoke(native))
            .pop_block(comment=self.generate_metadata_comment(native)))
        return self

    def push_namespace(self, name: str) -> "ZigCodeGenerator":
        """Open a `pub const Name = struct {` container"""
        if not name or not name.strip():
            raise ValueError(f"Invalid namespace name {name!r}")
        n = transform_namespace_name(name, self.settings.zig_compliant)
        self.writer.write_line(f"pub const {n} = struct").push_block(one_line=False)
        return self

    def pop_namespace(self) -> "ZigCodeGenerator":
        """Close the current namespace container"""
        self.writer.pop_block(self.NAMESPACE_CLOSING).write_blank_line()
        return self

    def getvalue(self) -> str:
        return self.writer.getvalue()
