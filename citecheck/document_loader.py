"""Document Loader Module - Reads plain-text documents and writes reports."""

from datetime import datetime
from pathlib import Path
from typing import Optional
from loguru import logger


class DocumentLoader:
    """Handles file I/O around the citation engine."""

    def __init__(self, input_path: str, encoding: str = 'utf-8'):
        self.input_path = Path(input_path).resolve()
        self.encoding = encoding
        self.content: Optional[str] = None
        if not self.input_path.exists():
            raise FileNotFoundError(f"File not found: {self.input_path}")

    def read(self) -> str:
        """Read the input document.

        Line endings are left untouched so offsets match the file contents.
        """
        logger.info(f"Reading: {self.input_path}")
        with open(self.input_path, 'r', encoding=self.encoding, newline='') as f:
            self.content = f.read()
        logger.info(f"Read {len(self.content)} characters")
        return self.content

    def get_output_path(self, output_path: Optional[str] = None, suffix: str = '.md') -> Path:
        """Determine the report file path.

        A directory as ``output_path`` receives the default file name.
        """
        default_name = f"{self.input_path.stem}_citations{suffix}"
        if output_path:
            path = Path(output_path).resolve()
            return path / default_name if path.is_dir() else path
        return self.input_path.parent / default_name

    def write_output(self, content: str, output_path: Optional[str] = None, suffix: str = '.md') -> Path:
        """Write a report next to the input, or to ``output_path``."""
        out_path = self.get_output_path(output_path, suffix)
        logger.info(f"Writing to: {out_path}")
        with open(out_path, 'w', encoding='utf-8') as f:
            f.write(content)
        logger.info(f"Wrote {len(content)} characters")
        return out_path

    def get_file_info(self) -> dict:
        """Get input file metadata."""
        stat = self.input_path.stat()
        return {
            'path': str(self.input_path),
            'name': self.input_path.name,
            'size_bytes': stat.st_size,
            'modified': datetime.fromtimestamp(stat.st_mtime).isoformat(),
        }
