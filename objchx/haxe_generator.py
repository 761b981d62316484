"""Haxe Generator - generates hxcpp extern classes for Objective-C interfaces"""

from .errors import ResolutionError
from .types import BindingParam, BindingUnit, DeclarationNode, DeclKind, MethodBinding
from .type_mapper import TypeMapper

SELECTOR_SEPARATOR = ":"


class HaxeGenerator:
    """Generates Haxe extern class declarations"""

    METHOD_KINDS = (DeclKind.INSTANCE_METHOD, DeclKind.CLASS_METHOD)

    def __init__(self, package: str = "appkit"):
        self.package = package

    def emit_class(self, decl: DeclarationNode) -> BindingUnit:
        """Build the binding unit for one interface declaration.

        Children are visited in declaration order; properties and any other
        member kinds are skipped. The unit is only returned once every method
        has been resolved, so a failure never leaves a half-built unit behind.
        """
        if not decl.name:
            raise ResolutionError("class name")

        unit = BindingUnit(package=self.package, class_name=decl.name)
        for child in decl.children:
            if child.kind in self.METHOD_KINDS:
                unit.methods.append(self._method_binding(decl.name, child))
        return unit

    def _method_binding(self, class_name: str, method: DeclarationNode) -> MethodBinding:
        selector = method.name
        if not selector:
            raise ResolutionError("method name", class_name)
        where = f"{class_name} {selector}"

        if method.result_type is None:
            raise ResolutionError("result type", where)
        if method.arguments is None:
            raise ResolutionError("arguments", where)

        params = []
        for arg in method.arguments:
            if not arg.name:
                raise ResolutionError("argument name", where)
            if arg.type is None:
                raise ResolutionError(f"type of argument '{arg.name}'", where)
            params.append(BindingParam(name=arg.name, type=TypeMapper.map(arg.type)))

        return MethodBinding(
            name=selector.split(SELECTOR_SEPARATOR)[0],
            selector=selector,
            return_type=TypeMapper.map(method.result_type),
            params=params,
            is_static=method.kind == DeclKind.CLASS_METHOD,
        )

    def render(self, unit: BindingUnit) -> str:
        """Render a binding unit as Haxe source"""
        lines = [
            f"package {unit.package};",
            f"@:objc extern class {unit.class_name} {{",
        ]
        for method in unit.methods:
            lines.append(self._method_line(method))
        lines.append("}")
        return "\n".join(lines) + "\n"

    def _method_line(self, method: MethodBinding) -> str:
        static = "static " if method.is_static else ""
        params = ", ".join(f"{p.name}: {p.type}" for p in method.params)
        return (f'    @:native("{method.selector}") public {static}function '
                f'{method.name}({params}): {method.return_type};')

    def generate_class(self, decl: DeclarationNode) -> str:
        """Generate Haxe source for one interface declaration"""
        return self.render(self.emit_class(decl))
