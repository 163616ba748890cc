"""
Main Zig bindings generator orchestration
"""

import sys
from pathlib import Path

from .code_generators import GenerationContext, ZigCodeGenerator
from .config import GeneratorSettings
from .natives import NativeDescriptor, load_natives


class ZigBindingsGenerator:
    """Main orchestrator for generating Zig bindings from a natives database"""

    def __init__(self, settings: GeneratorSettings | None = None):
        self.settings = (settings or GeneratorSettings()).validate()

    def _select_namespaces(self, natives: dict[str, list[NativeDescriptor]],
                           namespaces: list[str] | None) -> list[str]:
        """Namespaces to generate: database order, or the order of the requested list"""
        if not namespaces:
            return list(natives)

        selected = []
        for namespace in namespaces:
            if namespace not in natives:
                print(f"Warning: Namespace not found in natives: {namespace}", file=sys.stderr)
                continue
            selected.append(namespace)
        return selected

    def generate(self, natives: dict[str, list[NativeDescriptor]], output: str = None,
                 context: GenerationContext = None, namespaces: list[str] = None) -> str:
        """Generate Zig bindings for natives grouped by namespace"""
        code_generator = ZigCodeGenerator(self.settings)
        code_generator.start(context or GenerationContext.now())

        # Keep stdout clean when the bindings themselves are printed there
        progress = sys.stdout if output else sys.stderr

        for namespace in self._select_namespaces(natives, namespaces):
            namespace_natives = natives[namespace]
            if not namespace_natives:
                continue
            print(f"Processing namespace: {namespace} ({len(namespace_natives)} natives)", file=progress)

            code_generator.push_namespace(namespace)
            for native in namespace_natives:
                code_generator.add_native(native)
            code_generator.pop_namespace()

        code_generator.end()
        output_text = code_generator.getvalue()

        # Write to file or return
        if output:
            # newline="" keeps the configured line endings as written
            Path(output).write_text(output_text, encoding="utf-8", newline="")
            print(f"Generated bindings: {output}")
        else:
            print(output_text, end="")

        return output_text

    def generate_from_file(self, natives_path, output: str = None,
                           context: GenerationContext = None, namespaces: list[str] = None) -> str:
        """Load a natives JSON file and generate bindings for it"""
        natives = load_natives(natives_path)
        return self.generate(natives, output=output, context=context, namespaces=namespaces)
