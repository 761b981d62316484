"""Destinations for rendered binding units"""

from pathlib import Path
from typing import Protocol


class BindingSink(Protocol):
    """Accepts one finished binding unit keyed by class name"""

    def write(self, class_name: str, content: str) -> None:
        ...


class DirectorySink:
    """Writes one file per class into an output directory"""

    def __init__(self, output_dir: Path, extension: str = ".hx"):
        self.output_dir = Path(output_dir)
        self.extension = extension
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, class_name: str) -> Path:
        return self.output_dir / f"{class_name}{self.extension}"

    def write(self, class_name: str, content: str) -> None:
        path = self.path_for(class_name)
        path.write_text(content)
        print(f"Generated: {path}")


class MemorySink:
    """Keeps rendered units in a dict; a repeated class name replaces the earlier unit"""

    def __init__(self):
        self.units: dict[str, str] = {}

    def write(self, class_name: str, content: str) -> None:
        self.units[class_name] = content
