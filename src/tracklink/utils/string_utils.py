"""
String utility functions for normalization and comparison.
"""

import re
from typing import Optional

# Trailing parenthetical qualifiers such as "(live)" or "(radio edit) (2011 remaster)"
EXTRA_TITLE_INFO_PATTERN = re.compile(r'(\([^)]+\) ?)*$')
NON_WORD_PATTERN = re.compile(r'\W+')


def compact_for_comparison(s: Optional[str]) -> str:
    """
    Lowercase and drop every non-word character ("Don't Stop!" -> "dontstop").
    
    A name made only of punctuation compacts to nothing, in which case the
    original string is returned so it can still be compared.
    """
    if not s:
        return ""
    return NON_WORD_PATTERN.sub('', s).lower() or s


def strip_extra_title_info(name: Optional[str]) -> str:
    """Remove trailing parenthetical qualifiers: "Intro (Live)" -> "Intro"."""
    if not name:
        return ""
    return EXTRA_TITLE_INFO_PATTERN.sub('', name, count=1).rstrip()
