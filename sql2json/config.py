import os
from dataclasses import dataclass
from typing import Optional

# ---------- Configuration ----------
OUTPUT_MODES = ('combined', 'separate')
DEFAULT_OUT_DIR = os.getenv("SQL2JSON_OUT_DIR", "json-output")
DEFAULT_BATCH_SIZE = 500
PROGRESS_EVERY_LINES = 1000
LARGE_FILE_MB = 10


@dataclass
class ConverterOptions:
    batch_size: int = DEFAULT_BATCH_SIZE
    show_memory: bool = False
    limit: Optional[int] = None
    skip_unparsable: bool = False
    output_mode: str = 'combined'
    output_dir: str = DEFAULT_OUT_DIR

    def __post_init__(self):
        if self.output_mode not in OUTPUT_MODES:
            raise ValueError(f"output_mode must be one of {OUTPUT_MODES}, got {self.output_mode!r}")
        # 0 / negative means "no limit"
        if self.limit is not None and self.limit <= 0:
            self.limit = None
        if not self.batch_size or self.batch_size <= 0:
            self.batch_size = DEFAULT_BATCH_SIZE
        if not self.output_dir:
            self.output_dir = DEFAULT_OUT_DIR
