"""Generating rust-project.json so rust-analyzer understands the exercises."""

from __future__ import annotations

import dataclasses
import json
import os
import subprocess
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_FILE = "./rust-project.json"
_EXERCISES_DIR = os.path.join(".", "exercises")


@dataclass
class Crate:
    """One crate entry of rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


def _walk(directory: str) -> Iterator[str]:
    try:
        names = sorted(os.listdir(directory))
    except FileNotFoundError:
        return
    for name in names:
        path = os.path.join(directory, name)
        yield path
        if os.path.isdir(path):
            yield from _walk(path)


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return the JSON document as plain data."""
        return {
            "sysroot_src": self.sysroot_src,
            "crates": [dataclasses.asdict(crate) for crate in self.crates],
        }

    def write_to_disk(self) -> None:
        """Write rust-project.json to the current directory."""
        Path(_PROJECT_FILE).write_text(
            json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False),
            encoding="utf-8",
        )

    def _add_path(self, path: str) -> None:
        if os.path.splitext(path)[1] == ".rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self) -> None:
        """Add a crate for every .rs file under ./exercises."""
        for path in _walk(_EXERCISES_DIR):
            self._add_path(path)

    def get_sysroot_src(self) -> None:
        """Find the standard library sources from RUST_SRC_PATH or the default toolchain."""
        path = os.environ.get("RUST_SRC_PATH")
        if path is not None:
            self.sysroot_src = path
            return

        result = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True)
        output = result.stdout.decode("utf-8", errors="replace")
        words = output.split()
        toolchain = words[0] if words else output

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = os.path.join(
            toolchain, "lib", "rustlib", "src", "rust", "library"
        )