#!/usr/bin/env python3
"""
Objective-C to Haxe Binding Generator

Parses an Objective-C framework header with libclang and writes one
hxcpp extern class (<ClassName>.hx) per Objective-C interface.

Usage:
    python generate_bindings.py --framework AppKit
    python generate_bindings.py path/to/Header.h --package mylib --output-dir generated/
"""

import argparse
import os
import sys
import time
from pathlib import Path

# Add parent directory to path so objchx package can be found
sys.path.insert(0, str(Path(__file__).parent.parent))

from objchx import (
    ConfigError,
    DeclarationWalker,
    DirectorySink,
    HaxeGenerator,
    ObjcHxError,
    ParseConfig,
)
from objchx.config import DEFAULT_TARGET
from objchx.parser import ClangParser


def build_config(args) -> ParseConfig:
    options = {"target": args.target, "include_dirs": args.include or []}
    if args.header:
        return ParseConfig(
            header=Path(args.header),
            sdk_path=args.sdk_path or "",
            clang_path=args.clang_path or "",
            **options,
        )
    # Framework headers need both SDK and clang resource paths
    if not args.sdk_path:
        raise ConfigError("MAC_SDK_PATH not set (use --sdk-path)")
    if not args.clang_path:
        raise ConfigError("CLANG_PATH not set (use --clang-path)")
    return ParseConfig.for_framework(args.framework, args.sdk_path, args.clang_path, **options)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate Haxe externs from Objective-C headers")
    parser.add_argument("header", nargs="?", help="Header to parse (default: the framework umbrella header)")
    parser.add_argument("--framework", default="AppKit", help="SDK framework to translate")
    parser.add_argument("--sdk-path", default=os.environ.get("MAC_SDK_PATH", ""), help="macOS SDK root")
    parser.add_argument("--clang-path", default=os.environ.get("CLANG_PATH", ""), help="clang installation root")
    parser.add_argument("--libclang", default=os.environ.get("LIBCLANG_PATH", ""), help="libclang shared library")
    parser.add_argument("--target", default=DEFAULT_TARGET, help="clang target triple")
    parser.add_argument("--package", default="", help="Haxe package (default: framework name in lower case)")
    parser.add_argument("--output-dir", "-o", default="", help="Output directory (default: package name)")
    parser.add_argument("-I", "--include", action="append", default=None, help="Additional include directory")
    return parser


def main():
    start_time = time.perf_counter()
    args = build_arg_parser().parse_args()

    package = args.package or args.framework.lower()
    output_dir = Path(args.output_dir or package)

    try:
        config = build_config(args)
        clang = ClangParser(config, library_file=args.libclang)
        root = clang.parse()
        for diagnostic in clang.diagnostics:
            print(diagnostic)

        walker = DeclarationWalker(HaxeGenerator(package), DirectorySink(output_dir))
        count = walker.walk(root)
    except ObjcHxError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)

    elapsed = time.perf_counter() - start_time
    print(f"Generated {count} classes in {elapsed*1000:.2f} ms")


if __name__ == "__main__":
    main()
