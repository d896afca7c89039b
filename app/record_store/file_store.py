# app/record_store/file_store.py
"""
File-Backed Record Store
Each collection is a single JSON array on disk. Every operation loads the
whole file, mutates it in memory and rewrites it. There is no locking, so
concurrent writers to the same file can lose each other's updates.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from app.shared.exceptions import ParseError, ReadError
from config.appconfig import settings

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

QUEUE = "queue"
REPORTS = "reports"
ATTENDED = "attended"


def _reject_constant(name: str):
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


class RecordStore:
    """Whole-file list / append / move over the three clinic collections."""

    def __init__(self, data_dir: Optional[Path] = None, filenames: Optional[Dict[str, str]] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else settings.resolved_data_dir
        self.filenames = filenames or {
            QUEUE: settings.QUEUE_FILE,
            REPORTS: settings.REPORTS_FILE,
            ATTENDED: settings.ATTENDED_FILE,
        }

    def path_for(self, collection: str) -> Path:
        if collection not in self.filenames:
            raise KeyError(f"Unknown collection: {collection}")
        return self.data_dir / self.filenames[collection]

    # ========================================================================
    # LOW-LEVEL FILE ACCESS
    # ========================================================================
    def _read_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(path, f"Collection file is not valid UTF-8 ({e})") from e
        except OSError as e:
            raise ReadError(path, f"Cannot read collection file ({e.__class__.__name__})") from e

    def _parse(self, path: Path, text: str) -> Any:
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except ValueError as e:
            raise ParseError(path, f"Invalid JSON in collection file ({e})") from e

    def _write(self, path: Path, records: List[Record]) -> None:
        path.write_text(json.dumps(records, indent=2, ensure_ascii=False, allow_nan=False), encoding="utf-8")

    def _load_array(self, path: Path) -> List[Record]:
        records = self._parse(path, self._read_text(path))
        if not isinstance(records, list):
            raise ParseError(path, "Collection file does not hold a JSON array")
        return records

    def _load_or_empty(self, path: Path) -> List[Record]:
        """
        Soft-recovery read used by append only.

        Missing, blank, unparsable or non-array content is treated as an empty
        collection. Any other read failure still propagates.
        """
        try:
            text = self._read_text(path)
        except ReadError as e:
            if isinstance(e.__cause__, FileNotFoundError):
                logger.info(f"📄 {path.name} does not exist yet, starting empty")
                return []
            raise
        except ParseError:
            logger.warning(f"⚠️  {path.name} is not valid UTF-8, treating it as empty")
            return []

        if not text.strip():
            return []

        try:
            records = self._parse(path, text)
        except ParseError:
            logger.warning(f"⚠️  {path.name} is not valid JSON, treating it as empty")
            return []

        if not isinstance(records, list):
            logger.warning(f"⚠️  {path.name} does not hold a JSON array, treating it as empty")
            return []
        return records

    @staticmethod
    def next_id(records: List[Record]) -> int:
        """max(existing integer ids) + 1, or 1 when there are none."""
        ids = [
            r.get("id")
            for r in records
            if isinstance(r, dict) and isinstance(r.get("id"), int) and not isinstance(r.get("id"), bool)
        ]
        return max(ids) + 1 if ids else 1

    # ========================================================================
    # COLLECTION OPERATIONS
    # ========================================================================
    def list_records(self, collection: str) -> Any:
        """Return the parsed content of a collection unchanged."""
        path = self.path_for(collection)
        return self._parse(path, self._read_text(path))

    def append_record(self, collection: str, record: Record) -> Record:
        """Assign the next id to ``record``, append it and rewrite the file."""
        path = self.path_for(collection)
        records = self._load_or_empty(path)

        record["id"] = self.next_id(records)
        records.append(record)
        self._write(path, records)

        logger.info(f"✅ Appended record id={record['id']} to {path.name} ({len(records)} total)")
        return record

    def move_record(self, source: str, target: str, match_id: Any, record: Record) -> int:
        """
        Remove every ``source`` element whose id equals ``match_id`` and append
        ``record`` to ``target``.

        The two rewrites are independent: if the second one fails, the source
        has already been rewritten. Returns the number of removed elements.
        """
        source_path = self.path_for(source)
        source_records = self._load_array(source_path)
        kept = [r for r in source_records if not (isinstance(r, dict) and r.get("id") == match_id)]
        self._write(source_path, kept)
        removed = len(source_records) - len(kept)

        target_path = self.path_for(target)
        target_records = self._load_array(target_path)
        target_records.append(record)
        self._write(target_path, target_records)

        logger.info(
            f"✅ Moved id={match_id} from {source_path.name} to {target_path.name} "
            f"({removed} removed)"
        )
        return removed
