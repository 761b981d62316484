"""Exceptions raised while translating Objective-C headers"""


class ObjcHxError(Exception):
    """Base class for translation errors"""


class ResolutionError(ObjcHxError):
    """A declaration lacks a name, type or argument list the AST should provide"""

    def __init__(self, what: str, declaration: str = ""):
        self.what = what
        self.declaration = declaration
        if declaration:
            super().__init__(f"Cannot resolve {what} of {declaration}")
        else:
            super().__init__(f"Cannot resolve {what}")


class ParseError(ObjcHxError):
    """libclang did not produce a translation unit"""


class ConfigError(ObjcHxError):
    """Required configuration is missing"""
