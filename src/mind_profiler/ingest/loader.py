"""Load document corpora from disk."""

import json
from datetime import datetime, timezone
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from mind_profiler.models.document import Document


class DocumentLoadError(ValueError):
    """Raised when a corpus file cannot be read or parsed."""


_DOCUMENT_LIST = TypeAdapter(list[Document])


def load_documents(path: Path) -> list[Document]:
    """
    Load documents from a file or directory.

    Supports:
    - .json files (a list of documents, or an object with a "documents" list)
    - .jsonl files (one document per line)
    - directories of .txt files (one document per file, dated by mtime)
    """
    path = Path(path)

    if path.is_dir():
        return load_text_directory(path)

    suffix = path.suffix.lower()

    if suffix == ".json":
        return load_json(path)
    elif suffix == ".jsonl":
        return load_jsonl(path)
    else:
        raise DocumentLoadError(f"Unsupported file format: {suffix}")


def load_json(path: Path) -> list[Document]:
    """Load a JSON array of documents."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DocumentLoadError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("documents")

    if not isinstance(data, list):
        raise DocumentLoadError(f"{path} does not contain a list of documents")

    return _validate(data, path)


def load_jsonl(path: Path) -> list[Document]:
    """Load newline-delimited JSON documents."""
    records = []
    for line_num, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        if not line.strip():
            continue
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError as e:
            raise DocumentLoadError(f"Invalid JSON on line {line_num} of {path}: {e}") from e

    return _validate(records, path)


def load_text_directory(path: Path) -> list[Document]:
    """Load every .txt file in a directory, dated by modification time."""
    documents: list[Document] = []

    for file_path in sorted(path.glob("*.txt")):
        modified = datetime.fromtimestamp(file_path.stat().st_mtime, tz=timezone.utc)
        documents.append(
            Document(id=file_path.stem, content=load_txt(file_path), date=modified)
        )

    return documents


def load_txt(path: Path) -> str:
    """Load a plain text file."""
    # Try common encodings
    for encoding in ["utf-8", "utf-8-sig", "latin-1", "cp1252"]:
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue

    raise DocumentLoadError(f"Could not decode {path} with any common encoding")


def _validate(records: list, path: Path) -> list[Document]:
    try:
        return _DOCUMENT_LIST.validate_python(records)
    except ValidationError as e:
        raise DocumentLoadError(f"Malformed document in {path}: {e.error_count()} error(s)\n{e}") from e
