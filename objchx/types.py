"""Data types for Objective-C declarations and Haxe binding units"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class DeclKind(Enum):
    """Declaration node kinds the translator distinguishes"""
    INTERFACE = "ObjCInterfaceDecl"
    PROTOCOL = "ObjCProtocolDecl"
    RECORD = "StructDecl"
    INSTANCE_METHOD = "ObjCInstanceMethodDecl"
    CLASS_METHOD = "ObjCClassMethodDecl"
    PROPERTY = "ObjCPropertyDecl"
    PARAMETER = "ParmDecl"
    OTHER = "Other"


class TypeKind(Enum):
    """Native type kinds with a structural Haxe mapping"""
    OBJC_OBJECT_POINTER = "ObjCObjectPointer"
    OBJC_OBJECT = "ObjCObject"
    OBJC_INTERFACE = "ObjCInterface"
    OBJC_ID = "ObjCId"
    OBJC_SEL = "ObjCSel"
    BLOCK_POINTER = "BlockPointer"
    FUNCTION_PROTO = "FunctionPrototype"
    VOID = "Void"
    OTHER = "Other"


@dataclass
class TypeExpr:
    """Native type expression"""
    kind: TypeKind
    display_name: str = ""
    pointee: Optional["TypeExpr"] = None
    base_type: Optional["TypeExpr"] = None
    type_arguments: list["TypeExpr"] = field(default_factory=list)
    kind_name: str = ""

    def __post_init__(self):
        if not self.kind_name:
            self.kind_name = self.kind.value


@dataclass
class DeclarationNode:
    """Node of the parsed interface tree"""
    kind: DeclKind
    name: Optional[str] = None
    children: list["DeclarationNode"] = field(default_factory=list)
    arguments: Optional[list["DeclarationNode"]] = None
    result_type: Optional[TypeExpr] = None
    type: Optional[TypeExpr] = None


@dataclass
class BindingParam:
    """Method parameter with its mapped Haxe type"""
    name: str
    type: str


@dataclass
class MethodBinding:
    """Extern method entry"""
    name: str
    selector: str
    return_type: str
    params: list[BindingParam] = field(default_factory=list)
    is_static: bool = False


@dataclass
class BindingUnit:
    """Complete extern class for one native class"""
    package: str
    class_name: str
    methods: list[MethodBinding] = field(default_factory=list)
