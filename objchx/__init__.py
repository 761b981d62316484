"""
Objective-C to Haxe Binding Generator Package

Parses Objective-C framework headers with libclang and generates:
  1. One hxcpp extern class per Objective-C interface
  2. @:native selector bindings for every instance and class method
"""

from .types import (
    DeclKind, TypeKind, DeclarationNode, TypeExpr,
    BindingParam, MethodBinding, BindingUnit,
)
from .errors import ObjcHxError, ResolutionError, ParseError, ConfigError
from .config import ParseConfig
from .type_mapper import TypeMapper
from .haxe_generator import HaxeGenerator
from .sink import BindingSink, DirectorySink, MemorySink
from .walker import DeclarationWalker

__all__ = [
    'DeclKind', 'TypeKind', 'DeclarationNode', 'TypeExpr',
    'BindingParam', 'MethodBinding', 'BindingUnit',
    'ObjcHxError', 'ResolutionError', 'ParseError', 'ConfigError',
    'ParseConfig', 'TypeMapper', 'HaxeGenerator',
    'BindingSink', 'DirectorySink', 'MemorySink',
    'DeclarationWalker',
]
