"""Label normalization shared by the enum value objects."""

import re

_SEPARATORS = re.compile(r"[\s_\-]+")


def normalize_label(label: object) -> str:
    """Lowercase a transport label and drop spaces, underscores and dashes.

    Example:
        >>> normalize_label("Very Active")
        'veryactive'
        >>> normalize_label(" poco_activo ")
        'pocoactivo'
    """
    if label is None:
        return ""
    return _SEPARATORS.sub("", str(label)).lower()
