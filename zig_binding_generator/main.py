#!/usr/bin/env python3
"""
CLI entry point for Zig bindings generator
Generates Zig native wrappers calling a user supplied invoker
"""

import argparse
import dataclasses
import sys
import os

# Add parent directory to sys.path for direct execution
if __name__ == '__main__' and __package__ is None:
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from zig_binding_generator.code_generators import GenerationContext
from zig_binding_generator.config import BindingConfig, parse_config_file
from zig_binding_generator.constants import DEFAULT_ORIGIN
from zig_binding_generator.generator import ZigBindingsGenerator
from zig_binding_generator.natives import load_natives


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate Zig bindings from a natives JSON database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --natives natives.json --output natives.zig
  %(prog)s -n natives.json -C bindings.xml -o natives.zig --invoke-function invokeNative
        """
    )

    parser.add_argument(
        "-n", "--natives",
        metavar="NATIVES_FILE",
        required=True,
        help="Natives JSON database to generate bindings for"
    )

    parser.add_argument(
        "-o", "--output",
        metavar="FILE",
        help="Output Zig file (default: print to stdout)"
    )

    parser.add_argument(
        "-C", "--config",
        metavar="CONFIG_FILE",
        help="XML configuration file with generator options"
    )

    parser.add_argument(
        "--origin",
        default=DEFAULT_ORIGIN,
        metavar="URL",
        help=f"Origin written to the header and used for native links (default: {DEFAULT_ORIGIN})"
    )

    parser.add_argument(
        "--invoke-function",
        metavar="NAME",
        help="Name of the invoker function (overrides the config file)"
    )

    args = parser.parse_args(argv)

    config = BindingConfig()
    if args.config:
        try:
            config = parse_config_file(args.config)
        except (ValueError, FileNotFoundError) as e:
            print(f"Error reading config file: {e}", file=sys.stderr)
            sys.exit(1)

    settings = config.settings
    if args.invoke_function:
        settings = dataclasses.replace(settings, invoke_function=args.invoke_function)

    try:
        natives = load_natives(args.natives)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error reading natives file: {e}", file=sys.stderr)
        sys.exit(1)

    if not natives:
        print("Error: No namespaces found in natives file", file=sys.stderr)
        sys.exit(1)

    # Generate bindings
    try:
        generator = ZigBindingsGenerator(settings)
        generator.generate(
            natives,
            output=args.output,
            context=GenerationContext.now(args.origin),
            namespaces=config.namespaces
        )
    except Exception as e:
        import traceback
        print(f"Error: {e}", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
