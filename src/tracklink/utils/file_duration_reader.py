"""
Read track title and length from local audio files.
"""

from pathlib import Path
from typing import Optional
import logging

from mutagen import File as MutagenFile, MutagenError

logger = logging.getLogger(__name__)


def get_file_length(file_path: Path) -> Optional[int]:
    """
    Get the duration of an audio file in milliseconds.
    
    Args:
        file_path: Path to the audio file
        
    Returns:
        Duration in milliseconds, or None if unable to read
    """
    try:
        audio_file = MutagenFile(str(file_path))
    except (MutagenError, OSError) as e:
        logger.debug(f"Error reading file duration from {file_path}: {e}")
        return None
    
    if audio_file is None:
        logger.debug(f"Could not load audio file: {file_path}")
        return None
    
    length = getattr(getattr(audio_file, 'info', None), 'length', None)
    if length and length > 0:
        return int(round(length * 1000))
    
    logger.debug(f"No duration found in file: {file_path}")
    return None


def get_file_title(file_path: Path) -> Optional[str]:
    """Get the title tag of an audio file, if any."""
    try:
        audio_file = MutagenFile(str(file_path), easy=True)
    except (MutagenError, OSError) as e:
        logger.debug(f"Error reading tags from {file_path}: {e}")
        return None
    
    if audio_file is None or not audio_file.tags:
        return None
    titles = audio_file.tags.get('title')
    return titles[0] if titles else None


def format_length(length: Optional[int]) -> str:
    """
    Format a length in milliseconds as M:SS or H:MM:SS.
    """
    if length is None or length < 0:
        return "?:??"
    
    total_seconds = int(round(length / 1000))
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    secs = total_seconds % 60
    
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def parse_length(length_str: Optional[str]) -> Optional[int]:
    """
    Parse "M:SS", "H:MM:SS" or a bare number of milliseconds.
    
    Returns:
        Length in milliseconds, or None if unable to parse
    """
    if not length_str:
        return None
    
    try:
        parts = length_str.strip().split(':')
        if len(parts) == 1:
            return int(parts[0])
        if len(parts) == 2:
            minutes, seconds = map(int, parts)
            return (minutes * 60 + seconds) * 1000
        if len(parts) == 3:
            hours, minutes, seconds = map(int, parts)
            return (hours * 3600 + minutes * 60 + seconds) * 1000
    except ValueError:
        pass
    
    return None
