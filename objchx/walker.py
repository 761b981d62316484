"""Top-level declaration walker"""

from .errors import ResolutionError
from .haxe_generator import HaxeGenerator
from .sink import BindingSink
from .types import DeclarationNode, DeclKind


class DeclarationWalker:
    """Selects class declarations from a translation unit and pushes their bindings to a sink

    Declarations from transitively included headers are walked as well;
    there is no filtering by originating file.
    """

    def __init__(self, generator: HaxeGenerator, sink: BindingSink):
        self.generator = generator
        self.sink = sink

    def walk(self, root: DeclarationNode) -> int:
        """Emit every top-level class; returns the number of units written"""
        count = 0
        for child in root.children:
            # Protocols and records are not translated yet
            if child.kind != DeclKind.INTERFACE:
                continue
            if not child.name:
                raise ResolutionError("class name")
            unit = self.generator.emit_class(child)
            self.sink.write(unit.class_name, self.generator.render(unit))
            count += 1
        return count
