"""NoGAL core: category database, ROM discovery and filter matching."""

from .category_db import (
    CATEGORY_SECTION,
    CategoryMap,
    default_category_path,
    load_category_file,
    parse_category_text,
    resolve_category_path,
)
from .matching import MATURE_MARKER, is_mature_filter, matches
from .rom_utils import (
    ROM_EXTENSIONS,
    VIDEO_DIR_NAME,
    is_rom_filename,
    list_rom_files,
    list_video_files,
    rom_identifier,
)

__all__ = [
    'CATEGORY_SECTION',
    'CategoryMap',
    'MATURE_MARKER',
    'ROM_EXTENSIONS',
    'VIDEO_DIR_NAME',
    'default_category_path',
    'is_mature_filter',
    'is_rom_filename',
    'list_rom_files',
    'list_video_files',
    'load_category_file',
    'matches',
    'parse_category_text',
    'resolve_category_path',
    'rom_identifier',
]
