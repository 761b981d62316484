"""Objective-C header parser built on libclang

Exposes clang cursors and types as read-only DeclarationNode / TypeExpr
views. Nodes are wrapped lazily, so the translation unit must stay alive
(keep the ClangParser around) until the walk is finished.
"""

from ctypes import c_uint
from typing import Optional

from clang.cindex import Config, Index, TranslationUnitLoadError, Type, conf

from .config import ParseConfig
from .errors import ParseError
from .types import DeclKind, TypeKind

# CXCursorKind -> DeclKind
DECL_KINDS = {
    11: DeclKind.INTERFACE,         # ObjCInterfaceDecl
    13: DeclKind.PROTOCOL,          # ObjCProtocolDecl
    2: DeclKind.RECORD,             # StructDecl
    16: DeclKind.INSTANCE_METHOD,   # ObjCInstanceMethodDecl
    17: DeclKind.CLASS_METHOD,      # ObjCClassMethodDecl
    14: DeclKind.PROPERTY,          # ObjCPropertyDecl
    10: DeclKind.PARAMETER,         # ParmDecl
}

# CXTypeKind -> TypeKind. Keyed by the raw id: the cindex TypeKind table
# lacks newer kinds such as ObjCObject and ObjCTypeParam.
TYPE_KINDS = {
    109: TypeKind.OBJC_OBJECT_POINTER,
    161: TypeKind.OBJC_OBJECT,
    108: TypeKind.OBJC_INTERFACE,
    27: TypeKind.OBJC_ID,
    29: TypeKind.OBJC_SEL,
    102: TypeKind.BLOCK_POINTER,
    111: TypeKind.FUNCTION_PROTO,
    2: TypeKind.VOID,
}

INVALID_TYPE = 0

METHOD_KINDS = (DeclKind.INSTANCE_METHOD, DeclKind.CLASS_METHOD)
POINTER_KINDS = (TypeKind.OBJC_OBJECT_POINTER, TypeKind.BLOCK_POINTER)
OBJECT_KINDS = (TypeKind.OBJC_OBJECT, TypeKind.OBJC_INTERFACE)

# libclang entry points for Objective-C generics that cindex does not wrap
_OBJC_FUNCTIONS = [
    ('clang_Type_getObjCObjectBaseType', [Type], Type),
    ('clang_Type_getNumObjCTypeArgs', [Type], c_uint),
    ('clang_Type_getObjCTypeArg', [Type, c_uint], Type),
]

_objc_registered = False


def _objc_lib():
    global _objc_registered
    lib = conf.lib
    if not _objc_registered:
        for name, argtypes, restype in _OBJC_FUNCTIONS:
            func = getattr(lib, name)
            func.argtypes = argtypes
            func.restype = restype
            if restype is Type:
                func.errcheck = Type.from_result
        _objc_registered = True
    return lib


def _valid(t: Type) -> Optional[Type]:
    if t is None or t._kind_id == INVALID_TYPE:
        return None
    return t


class ClangType:
    """TypeExpr view over a clang.cindex.Type"""

    def __init__(self, t: Type):
        self._type = t
        self.kind = TYPE_KINDS.get(t._kind_id, TypeKind.OTHER)
        self.kind_name = conf.lib.clang_getTypeKindSpelling(t._kind_id)
        self.display_name = t.spelling

    @property
    def pointee(self) -> Optional["ClangType"]:
        if self.kind not in POINTER_KINDS:
            return None
        pointee = _valid(self._type.get_pointee())
        return ClangType(pointee) if pointee else None

    @property
    def base_type(self) -> Optional["ClangType"]:
        if self.kind not in OBJECT_KINDS:
            return None
        base = _valid(_objc_lib().clang_Type_getObjCObjectBaseType(self._type))
        return ClangType(base) if base else None

    @property
    def type_arguments(self) -> list["ClangType"]:
        if self.kind not in OBJECT_KINDS:
            return []
        lib = _objc_lib()
        count = lib.clang_Type_getNumObjCTypeArgs(self._type)
        return [ClangType(lib.clang_Type_getObjCTypeArg(self._type, i)) for i in range(count)]

    def __repr__(self):
        return f"ClangType({self.kind_name}: {self.display_name})"


class ClangDeclaration:
    """DeclarationNode view over a clang.cindex.Cursor"""

    def __init__(self, cursor):
        self._cursor = cursor
        self.kind = DECL_KINDS.get(cursor._kind_id, DeclKind.OTHER)

    @property
    def name(self) -> Optional[str]:
        return self._cursor.spelling or None

    @property
    def children(self) -> list["ClangDeclaration"]:
        return [ClangDeclaration(c) for c in self._cursor.get_children()]

    @property
    def arguments(self) -> Optional[list["ClangDeclaration"]]:
        if self.kind not in METHOD_KINDS:
            return None
        return [ClangDeclaration(a) for a in self._cursor.get_arguments()]

    @property
    def result_type(self) -> Optional[ClangType]:
        if self.kind not in METHOD_KINDS:
            return None
        t = _valid(self._cursor.result_type)
        return ClangType(t) if t else None

    @property
    def type(self) -> Optional[ClangType]:
        t = _valid(self._cursor.type)
        return ClangType(t) if t else None

    def __repr__(self):
        return f"ClangDeclaration({self._cursor._kind_id}: {self._cursor.spelling})"


class ClangParser:
    """Parses an Objective-C header into a DeclarationNode tree"""

    def __init__(self, config: ParseConfig, library_file: str = ""):
        self.config = config
        if library_file and not Config.loaded:
            Config.set_library_file(library_file)
        self.translation_unit = None

    def parse(self) -> ClangDeclaration:
        """Parse the configured header and return the translation unit root"""
        index = Index.create()
        try:
            self.translation_unit = index.parse(str(self.config.header), args=self.config.clang_args())
        except TranslationUnitLoadError as exc:
            raise ParseError(f"Failed to parse {self.config.header}: {exc}") from exc
        return ClangDeclaration(self.translation_unit.cursor)

    @property
    def diagnostics(self) -> list[str]:
        """clang diagnostics as text, in the order clang reported them"""
        if self.translation_unit is None:
            return []
        return [d.format() for d in self.translation_unit.diagnostics]
