"""File I/O utilities for reading record exports and writing report artifacts."""

import json
from pathlib import Path

import pandas as pd
from rich.console import Console

type FilePath = str | Path

console = Console()

RECORD_SUFFIXES = (".csv", ".json")


def find_record_file(directory: FilePath, stem: str) -> Path:
    """Locate ``<stem>.csv`` or ``<stem>.json`` inside a data directory."""
    directory = Path(directory)
    for suffix in RECORD_SUFFIXES:
        candidate = directory / f"{stem}{suffix}"
        if candidate.exists():
            return candidate
    raise FileNotFoundError(f"No {stem} export found in {directory} (expected .csv or .json)")


def read_records(path: FilePath) -> pd.DataFrame:
    """Read a record export into a DataFrame, picking the reader by suffix."""
    path = Path(path)

    match path.suffix:
        case ".csv":
            return pd.read_csv(path)
        case ".json":
            with open(path, encoding="utf-8") as f:
                payload = json.load(f)
            match payload:
                case {"records": list(rows)}:
                    return pd.DataFrame(rows)
                case list(rows):
                    return pd.DataFrame(rows)
                case _:
                    raise ValueError(f"Unsupported JSON layout in {path}")
        case ext:
            raise ValueError(f"Unsupported record format: {ext}")


def write_json(payload: dict, path: FilePath) -> Path:
    """Write a JSON document, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, default=str), encoding="utf-8")
    console.print(f"  Wrote {path}")
    return path
