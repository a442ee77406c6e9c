"""
Public entry points.

Both functions take an optional options mapping followed by the spec:

    numseq_iter("1,3,5,...,13")
    numseq_parse({}, "1,3,9,...")

numseq_iter is strict and lets ParseError/ClassificationError propagate.
numseq_parse never raises for a bad spec; it returns a Response with
status 400 instead.

Author: xwest
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .config import OptionsLike, ParseOptions
from .iterator import SequenceIterator, iterate_sequence
from .lexer.errors import NumSeqError
from .sequence import parse_sequence

logger = logging.getLogger(__name__)

PARSE_FAIL_PREFIX = "Parse fail: "


@dataclass(frozen=True)
class Response:
    """Status envelope returned by numseq_parse."""
    status: int
    message: str
    payload: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.status == 200

    def as_list(self) -> List[Any]:
        """The [status, message, payload] form; payload omitted on failure."""
        if self.payload is None:
            return [self.status, self.message]
        return [self.status, self.message, self.payload]

    def __iter__(self):
        return iter(self.as_list())


def _split_args(name: str, args: Tuple[Any, ...], options: OptionsLike) -> Tuple[str, OptionsLike]:
    """Accept ``(spec)`` or ``(options, spec)``."""
    if len(args) == 2:
        if options is not None:
            raise TypeError(f"{name}() got options both positionally and by keyword")
        options, spec = args
        if not isinstance(options, (Mapping, ParseOptions)):
            raise TypeError(f"{name}() options must be a mapping, got {type(options).__name__}")
    elif len(args) == 1:
        spec = args[0]
    else:
        raise TypeError(f"{name}() takes a spec and optional options, got {len(args)} arguments")
    return spec, options


def numseq_iter(*args: Any, options: OptionsLike = None) -> SequenceIterator:
    """
    Return a generator for the numbers of a sequence spec.

    Usage:
        it = numseq_iter("1,3,5,...,13")
        while (value := it()) is not None: ...   # 1,3,5,7,9,11,13

    Raises:
        ParseError: If the spec is malformed
        ClassificationError: If the pattern can't be determined
    """
    spec, options = _split_args("numseq_iter", args, options)
    return iterate_sequence(spec, options)


def numseq_parse(*args: Any, options: OptionsLike = None) -> Response:
    """
    Parse a sequence spec into an enveloped description.

    Returns Response(200, "OK", payload) where payload has the keys
    numbers, has_ellipsis, last_number (only with an ellipsis), type and
    inc; or Response(400, "Parse fail: <reason>") for a bad spec.
    """
    spec, options = _split_args("numseq_parse", args, options)
    try:
        sequence = parse_sequence(spec, options)
    except NumSeqError as e:
        logger.debug("Rejected %r: %s", spec, e)
        return Response(400, PARSE_FAIL_PREFIX + e.message)
    return Response(200, "OK", sequence.to_dict())
