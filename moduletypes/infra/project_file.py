"""
Project snapshot files for moduletypes.

A snapshot file is an export of a host's modules:

    modules:
      - name: app
        facets: [Android, Kotlin]
        external_system: GRADLE

Supports JSON (default), YAML (.yaml/.yml) and TOML (.toml, read-only),
with:
- Atomic writes (write to temp, then rename)
- Thread-safe cached reads
"""

import json
import os
import tempfile
import threading
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

import yaml

from ..domain import ModuleRecord
from ..exit_codes import ProjectFileError
from .project_model import InMemoryProjectModel

logger = logging.getLogger(__name__)

YAML_SUFFIXES = ('.yaml', '.yml')
TOML_SUFFIXES = ('.toml',)


class ProjectFile:
    """
    Reader/writer for a project snapshot file.

    Example:
        model = ProjectFile(Path("project.yaml")).load_model()
        for module in model.modules():
            print(module.name)
    """

    def __init__(self, path: Path):
        """
        Initialize ProjectFile.

        Args:
            path: Path to the snapshot file
        """
        self.path = Path(path).expanduser().resolve()
        self._lock = threading.Lock()
        self._cache: Optional[Dict[str, Any]] = None

    @property
    def suffix(self) -> str:
        return self.path.suffix.lower()

    def read(self) -> Dict[str, Any]:
        """
        Read and parse the whole file.

        Returns:
            Parsed top-level mapping

        Raises:
            FileNotFoundError: If the file does not exist
            ProjectFileError: If the file cannot be parsed
        """
        with self._lock:
            if self._cache is not None:
                return self._cache.copy()

            if not self.path.exists():
                raise FileNotFoundError(f"Project file not found: {self.path}")

            try:
                data = self._parse()
            except (json.JSONDecodeError, tomllib.TOMLDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
                raise ProjectFileError(f"Cannot parse {self.path.name}: {e}") from e

            if data is None:
                data = {}
            if not isinstance(data, dict):
                raise ProjectFileError(f"{self.path.name} must contain a mapping at the root")

            self._cache = data
            return data.copy()

    def _parse(self) -> Any:
        if self.suffix in TOML_SUFFIXES:
            with open(self.path, 'rb') as f:
                return tomllib.load(f)
        with open(self.path, 'r', encoding='utf-8') as f:
            if self.suffix in YAML_SUFFIXES:
                return yaml.safe_load(f)
            text = f.read()
        if not text.strip():
            return {}
        return json.loads(text)

    def load_records(self) -> List[ModuleRecord]:
        """
        Parse the module entries of the file.

        Both a list of entries and a mapping of name -> entry are accepted.
        """
        modules = self.read().get('modules', [])
        if modules is None:
            return []

        if isinstance(modules, dict):
            entries = []
            for name, body in modules.items():
                if body is None:
                    body = {}
                if not isinstance(body, dict):
                    raise ProjectFileError(f"Module '{name}' must be a mapping")
                entries.append({**body, 'name': str(name)})
        elif isinstance(modules, list):
            entries = modules
        else:
            raise ProjectFileError("'modules' must be a list or a mapping")

        records = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ProjectFileError(f"Module entry #{index} must be a mapping")
            try:
                records.append(ModuleRecord.from_dict(entry))
            except ValueError as e:
                raise ProjectFileError(f"Module entry #{index}: {e}") from e

        logger.debug(f"Loaded {len(records)} modules from {self.path}")
        return records

    def load_model(self) -> InMemoryProjectModel:
        """Load the file into an in-memory project model."""
        return InMemoryProjectModel(self.load_records())

    def write(self, model: InMemoryProjectModel) -> None:
        """
        Persist a project model.

        Raises:
            ProjectFileError: If the file format cannot be written
        """
        if self.suffix in TOML_SUFFIXES:
            raise ProjectFileError("Writing TOML project files is not supported; use .json or .yaml")

        data = {'modules': [record.to_dict() for record in model.records()]}
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._write_atomic(data)
            self._cache = data

    def _write_atomic(self, data: Dict[str, Any]) -> None:
        """Write data atomically using temp file and rename."""
        fd, temp_path = tempfile.mkstemp(
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            suffix=".tmp"
        )

        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                if self.suffix in YAML_SUFFIXES:
                    yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
                else:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                    f.write('\n')

            os.replace(temp_path, self.path)

        except Exception:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise

    def invalidate_cache(self) -> None:
        """Invalidate in-memory cache, forcing next read from disk."""
        with self._lock:
            self._cache = None
