"""Parser configuration: header location, SDK paths and clang arguments"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError

DEFAULT_TARGET = "x86_64-apple-macos11.3"
DEFAULT_LANGUAGE = "objective-c"


@dataclass
class ParseConfig:
    """Everything libclang needs to parse one framework header"""
    header: Path
    sdk_path: str = ""
    clang_path: str = ""
    target: str = DEFAULT_TARGET
    language: str = DEFAULT_LANGUAGE
    include_dirs: list[str] = field(default_factory=list)
    extra_args: list[str] = field(default_factory=list)

    @classmethod
    def for_framework(cls, framework: str, sdk_path: str, clang_path: str = "", **kwargs) -> "ParseConfig":
        """Config for the umbrella header of an SDK framework, e.g. AppKit"""
        header = Path(sdk_path) / "System/Library/Frameworks" / f"{framework}.framework" / "Headers" / f"{framework}.h"
        return cls(header=header, sdk_path=sdk_path, clang_path=clang_path, **kwargs)

    @classmethod
    def from_env(cls, framework: str, **kwargs) -> "ParseConfig":
        """Read MAC_SDK_PATH and CLANG_PATH from the environment"""
        sdk_path = os.environ.get("MAC_SDK_PATH")
        if not sdk_path:
            raise ConfigError("MAC_SDK_PATH not set")
        clang_path = os.environ.get("CLANG_PATH")
        if not clang_path:
            raise ConfigError("CLANG_PATH not set")
        return cls.for_framework(framework, sdk_path, clang_path, **kwargs)

    def clang_args(self) -> list[str]:
        """Command-line arguments passed to libclang"""
        args = []
        if self.sdk_path:
            args.extend(["-isysroot", self.sdk_path, "-I", f"{self.sdk_path}/usr/include"])
        if self.clang_path:
            args.extend(["-I", f"{self.clang_path}/include"])
        for include in self.include_dirs:
            args.extend(["-I", include])
        args.extend(["-target", self.target, "-x", self.language])
        args.extend(self.extra_args)
        return args
