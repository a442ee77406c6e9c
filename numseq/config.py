"""
Options accepted by the numseq entry points.

No option is recognized yet; the map is reserved so that callers can
already pass one. Unknown keys are ignored with a warning.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseOptions:
    """Options for parsing and iterating a number sequence."""

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]] = None) -> "ParseOptions":
        """Build options from a plain mapping, dropping unknown keys."""
        if not options:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = sorted(key for key in options if key not in known)
        if unknown:
            logger.warning("Ignoring unknown numseq option(s): %s", ", ".join(map(str, unknown)))
        return cls(**{key: value for key, value in options.items() if key in known})


OptionsLike = Union[ParseOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike) -> ParseOptions:
    """Normalize whatever the caller passed as options."""
    if isinstance(options, ParseOptions):
        return options
    if options is None or isinstance(options, Mapping):
        return ParseOptions.from_mapping(options)
    raise TypeError(f"options must be a mapping, got {type(options).__name__}")
