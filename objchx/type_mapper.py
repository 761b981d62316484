"""Type mapping from Objective-C types to Haxe (hxcpp) types"""

from .types import TypeExpr, TypeKind


class TypeMapper:
    """Maps native Objective-C type expressions to Haxe type expressions"""

    POINTER_WRAPPER = 'cpp.Star'
    BLOCK_WRAPPER = 'cpp.objc.ObjcBlock'

    # Kinds that map to a fixed Haxe type
    FIXED_TYPES = {
        TypeKind.OBJC_ID: 'cpp.objc.NSObject',
        TypeKind.OBJC_SEL: 'SEL',
        TypeKind.FUNCTION_PROTO: 'haxe.Function',
        TypeKind.VOID: 'Void',
    }

    INTERFACE_TAG = '/* ObjCInterface */'

    # Nesting limit for providers whose type graphs may contain cycles
    MAX_DEPTH = 32

    @classmethod
    def map(cls, t: TypeExpr) -> str:
        """Convert a native type to a Haxe type string"""
        return cls._map(t, 0)

    @classmethod
    def _map(cls, t: TypeExpr, depth: int) -> str:
        if depth > cls.MAX_DEPTH:
            return cls.fallback(t)

        if t.kind in cls.FIXED_TYPES:
            return cls.FIXED_TYPES[t.kind]

        if t.kind == TypeKind.OBJC_OBJECT_POINTER:
            return cls._wrap(cls.POINTER_WRAPPER, t, depth)

        if t.kind == TypeKind.BLOCK_POINTER:
            return cls._wrap(cls.BLOCK_WRAPPER, t, depth)

        if t.kind == TypeKind.OBJC_OBJECT:
            if t.base_type is None:
                return cls.fallback(t)
            base = cls._map(t.base_type, depth + 1)
            if not t.type_arguments:
                return base
            return f'{base}<{cls._map_arguments(t, depth)}>'

        if t.kind == TypeKind.OBJC_INTERFACE:
            # Uses the display name rather than a mapped base type
            if not t.type_arguments:
                return f'{cls.INTERFACE_TAG} {t.display_name}'
            return f'{cls.INTERFACE_TAG} {t.display_name}<{cls._map_arguments(t, depth)}>'

        return cls.fallback(t)

    @classmethod
    def _wrap(cls, wrapper: str, t: TypeExpr, depth: int) -> str:
        if t.pointee is None:
            return cls.fallback(t)
        return f'{wrapper}<{cls._map(t.pointee, depth + 1)}>'

    @classmethod
    def _map_arguments(cls, t: TypeExpr, depth: int) -> str:
        return ', '.join(cls._map(arg, depth + 1) for arg in t.type_arguments)

    @classmethod
    def fallback(cls, t: TypeExpr) -> str:
        """Placeholder for types with no structural mapping, flagged for review"""
        name = t.display_name or '?'
        return f'{name} /* {t.kind_name or t.kind.value} */'
