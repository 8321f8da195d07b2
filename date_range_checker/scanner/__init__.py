from .filenames import (
    FILENAME_PATTERN,
    ScannedFile,
    compile_extension_pattern,
    parse_filename,
    parse_iso8601_date,
    scan_directory,
)

__all__ = [
    "FILENAME_PATTERN",
    "ScannedFile",
    "compile_extension_pattern",
    "parse_filename",
    "parse_iso8601_date",
    "scan_directory",
]
