"""Reading and writing lead JSON files"""

import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Union
import logging

from leads_core.errors import LeadIOError
from leads_core.schemas import LeadDataSchema

logger = logging.getLogger(__name__)


class OutputWriter:
    """Encode lead documents and move them to and from disk"""

    @staticmethod
    def encode(data: LeadDataSchema) -> bytes:
        """
        Encode a lead document as indented JSON

        Args:
            data: Lead document

        Returns:
            UTF-8 JSON bytes with lead fields in output order
        """
        return json.dumps(data.to_json_dict(), indent=2, ensure_ascii=False).encode('utf-8')

    @staticmethod
    def read_bytes(input_path: Union[str, Path]) -> bytes:
        """
        Read a lead file

        Raises:
            LeadIOError: If the file is missing, empty or unreadable
        """
        path = Path(input_path)
        if not path.is_file() or path.stat().st_size == 0:
            raise LeadIOError(f"The input file is empty or does not exist: {path}")
        try:
            return path.read_bytes()
        except OSError as e:
            raise LeadIOError(f"Could not read {path}: {e}") from e

    @staticmethod
    def _target_mode(path: Path) -> int:
        """Mode of the existing target, or what a plain open() would create"""
        if path.exists():
            return stat.S_IMODE(path.stat().st_mode)
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask

    @staticmethod
    def write_bytes(output_path: Union[str, Path], payload: bytes):
        """
        Write a file atomically through a temp file in the same directory

        Raises:
            LeadIOError: If the file cannot be written
        """
        path = Path(output_path)
        tmp = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(prefix=path.name + ".", dir=str(path.parent))
            with os.fdopen(fd, 'wb') as f:
                f.write(payload)
            os.chmod(tmp, OutputWriter._target_mode(path))
            os.replace(tmp, path)
        except OSError as e:
            raise LeadIOError(f"Could not write {path}: {e}") from e
        finally:
            if tmp and os.path.exists(tmp):
                os.unlink(tmp)

    @staticmethod
    def write_json(data: LeadDataSchema, output_path: Union[str, Path]):
        """Write a lead document to a JSON file"""
        OutputWriter.write_bytes(output_path, OutputWriter.encode(data))
        logger.debug(f"Wrote {len(data.leads or [])} leads to {output_path}")
