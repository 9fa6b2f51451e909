from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Any

import yaml

from transcode import CoreLoader

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"


def run_cli(cwd: Path, *args: str, stdin: str | None = None) -> subprocess.CompletedProcess[str]:
    cmd = [sys.executable, "-m", "transcode.cli", *args]
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC)
    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        input=stdin,
        text=True,
        capture_output=True,
        check=False,
    )


def decode_yaml(text: str | bytes) -> Any:
    return yaml.load(text, Loader=CoreLoader)


def decode_yaml_all(text: str | bytes) -> list[Any]:
    return list(yaml.load_all(text, Loader=CoreLoader))
