"""
Ignore directive grammar shared by every format
"""

import re

IGNORE_DIRECTIVE = 'i18nspector-ignore'

# `i18nspector-ignore`, `i18nspector-ignore-begin`, `i18nspector-ignore-end`
IGNORE_DIRECTIVE_PATTERN = rf'{IGNORE_DIRECTIVE}(?:-(?P<marker>begin|end))?'

# inside `//` or `/* */` comments, right after a delimiter
JSONC_DIRECTIVE_REGEXP = re.compile(rf'[*/]\s*{IGNORE_DIRECTIVE_PATTERN}(?:\*|\s|$)')

# whole `#` or `!` comment lines
PROPERTIES_DIRECTIVE_REGEXP = re.compile(rf'^[!#]\s*{IGNORE_DIRECTIVE_PATTERN}(?:\s|$)')

BEGIN = 'begin'
END = 'end'
