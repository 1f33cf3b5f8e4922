"""
Text parsers for pitch and interval names.

Pitch:    <Letter>[<Accidentals>][<SignedOctave>]       C4, F#3, Bbb5, C####4, G-1
Interval: [<Direction>]<Quality><Numeral>[+<N>oct]     Major3, -m3, Perfect5, AA4, M3+1oct

Both parsers return plain components; the Pitch and Interval types build
themselves from those.
"""

from __future__ import annotations

import logging
import re

from harmony_types.constants import (
    CHROMATIC_OCTAVE,
    DEFAULT_OCTAVE,
    DIATONIC_OCTAVE,
    OCTAVE_SUFFIX,
    PERFECT_SIZE_CLASSES,
    REFERENCE_SPANS,
)
from harmony_types.core.quality import Quality, QualityKind, chromatic_span
from harmony_types.core.spelling import ACCIDENTAL_LEADS, Accidental, Letter
from harmony_types.core.steps import StepPair, floor_divmod
from harmony_types.errors import (
    IncompleteError,
    InvalidAccidentalError,
    InvalidLetterError,
    InvalidOctaveError,
    InvalidQualityError,
    InvalidSizeError,
    ParseError,
)

logger = logging.getLogger(__name__)

_OCTAVE = re.compile(r"[+-]?[0-9]+")
_OCTAVE_LEADS = frozenset("+-0123456789")
_NUMERAL = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")
_MULTIPLICITY = re.compile(r"\(([0-9]+)\)")
_OCTAVE_SUFFIX = re.compile(r"\+([0-9]+)" + OCTAVE_SUFFIX + "$")
_INTERVAL = re.compile(
    r"(?P<quality>\([^)]*\)|[A-Za-z]+(?:\([^)]*\))?)?(?P<numeral>.*)",
    re.DOTALL,
)

# Long quality words, matched case-insensitively
_QUALITY_WORDS: dict[str, QualityKind] = {
    "perfect": QualityKind.PERFECT,
    "perf": QualityKind.PERFECT,
    "major": QualityKind.MAJOR,
    "maj": QualityKind.MAJOR,
    "minor": QualityKind.MINOR,
    "min": QualityKind.MINOR,
    "augmented": QualityKind.AUGMENTED,
    "aug": QualityKind.AUGMENTED,
    "diminished": QualityKind.DIMINISHED,
    "dim": QualityKind.DIMINISHED,
}

# Single-letter abbreviations, case-sensitive (m is minor, M is major)
_QUALITY_ABBREVIATIONS: dict[str, QualityKind] = {
    "P": QualityKind.PERFECT,
    "p": QualityKind.PERFECT,
    "M": QualityKind.MAJOR,
    "j": QualityKind.MAJOR,
    "m": QualityKind.MINOR,
}


def parse_pitch(text: str, default_octave: int = DEFAULT_OCTAVE) -> tuple[Letter, Accidental, int]:
    """
    Split a pitch name into letter, accidental and octave.

    The octave may be omitted, in which case default_octave is used.

    Raises:
        IncompleteError: empty input or no letter
        InvalidLetterError: first character is not C D E F G A B
        InvalidAccidentalError: unreadable accidental
        InvalidOctaveError: octave is not a signed integer
    """
    try:
        return _parse_pitch(text, default_octave)
    except ParseError as exc:
        logger.debug("Rejected pitch %r: %s", text, exc.reason)
        raise


def _parse_pitch(text: str, default_octave: int) -> tuple[Letter, Accidental, int]:
    source = text.strip()
    if not source:
        raise IncompleteError(text, "empty pitch name")

    head, rest = source[0], source[1:]
    if head in ACCIDENTAL_LEADS or head in _OCTAVE_LEADS:
        raise IncompleteError(text, "pitch name has no letter")
    try:
        letter = Letter.parse(head)
    except InvalidLetterError as exc:
        raise InvalidLetterError(text, f"{head!r} is not a pitch letter") from exc

    if rest.startswith("("):
        end = rest.find(")") + 1
        if end == 0:
            end = len(rest)
    else:
        end = 0
        while end < len(rest) and rest[end] not in _OCTAVE_LEADS:
            end += 1
    try:
        accidental = Accidental.parse(rest[:end])
    except InvalidAccidentalError as exc:
        raise InvalidAccidentalError(text, f"{exc.reason} in {exc.text!r}") from exc

    octave_text = rest[end:]
    if not octave_text:
        return letter, accidental, default_octave
    if _OCTAVE.fullmatch(octave_text) is None:
        raise InvalidOctaveError(text, f"octave {octave_text!r} is not a signed integer")
    return letter, accidental, int(octave_text)


def parse_interval(text: str) -> StepPair:
    """
    Parse an interval name into its step pair.

    Quality may be a word (major, Minor, AUGMENTED, dim, 'Augmented(2)' for
    doubly augmented), an abbreviation (P, M/j, m, A/a or d repeated), a signed
    offset in parentheses ('(-2)' diminished, '(-1)' minor, '(0)' perfect,
    '(+1)' major, '(+2)' augmented) or absent (perfect).

    Raises:
        IncompleteError: empty input or no numeral
        InvalidQualityError: unknown quality, or one the size cannot have
        InvalidSizeError: numeral is not a positive integer
    """
    try:
        return _parse_interval(text)
    except ParseError as exc:
        logger.debug("Rejected interval %r: %s", text, exc.reason)
        raise


def _parse_interval(text: str) -> StepPair:
    source = text.strip()
    if not source:
        raise IncompleteError(text, "empty interval name")

    descending = False
    if source[0] in "+-":
        descending = source[0] == "-"
        source = source[1:]

    octaves = 0
    suffix = _OCTAVE_SUFFIX.search(source)
    if suffix is not None:
        octaves = int(suffix.group(1))
        source = source[: suffix.start()]

    match = _INTERVAL.fullmatch(source)
    if match is None:
        raise IncompleteError(text, "unreadable interval name")
    quality_text = match.group("quality") or ""
    numeral = match.group("numeral")

    if not numeral:
        raise IncompleteError(text, "interval has no number")
    if _NUMERAL.fullmatch(numeral) is None or int(numeral) < 1:
        raise InvalidSizeError(text, f"interval number {numeral!r} must be a positive integer")

    diatonic = int(numeral) - 1 + DIATONIC_OCTAVE * octaves
    if quality_text.startswith("("):
        chromatic = _offset_span(diatonic, quality_text, text)
    else:
        quality = _parse_quality(quality_text, text)
        try:
            chromatic = chromatic_span(diatonic, quality)
        except InvalidQualityError as exc:
            raise InvalidQualityError(text, exc.reason) from exc

    steps = StepPair(diatonic, chromatic)
    return steps.negate() if descending else steps


def _parse_quality(token: str, text: str) -> Quality:
    if not token:
        return Quality.PERFECT

    if token in _QUALITY_ABBREVIATIONS:
        return Quality(_QUALITY_ABBREVIATIONS[token])
    if set(token) in ({"A"}, {"a"}):
        return Quality.augmented(len(token))
    if set(token) == {"d"}:
        return Quality.diminished(len(token))

    word, _, multiplicity = token.partition("(")
    kind = _QUALITY_WORDS.get(word.lower())
    if kind is None:
        raise InvalidQualityError(text, f"unknown quality {token!r}")
    if not multiplicity:
        return Quality(kind)

    degree = _MULTIPLICITY.fullmatch("(" + multiplicity)
    if degree is None or kind not in (QualityKind.AUGMENTED, QualityKind.DIMINISHED):
        raise InvalidQualityError(text, f"invalid quality multiplicity {token!r}")
    try:
        return Quality(kind, int(degree.group(1)))
    except ValueError as exc:
        raise InvalidQualityError(text, str(exc)) from exc


def _offset_span(diatonic: int, token: str, text: str) -> int:
    """
    Chromatic span for the signed-offset notation.

    Offsets count outward from the perfect (or the minor/major pair), skipping
    the values a size cannot take: perfect sizes reject +-1, the others reject 0.
    """
    inner = token[1:-1]
    if not token.endswith(")") or _SIGNED.fullmatch(inner) is None:
        raise InvalidQualityError(text, f"invalid quality offset {token!r}")
    offset = int(inner)

    octaves, size_class = floor_divmod(diatonic, DIATONIC_OCTAVE)
    if size_class in PERFECT_SIZE_CLASSES:
        if offset in (-1, 1):
            raise InvalidQualityError(text, "a perfect size has no minor or major quality")
        deviation = 0 if offset == 0 else offset - 1 if offset > 0 else offset + 1
    else:
        if offset == 0:
            raise InvalidQualityError(text, "this size has no perfect quality")
        deviation = offset - 1 if offset > 0 else offset

    return REFERENCE_SPANS[size_class] + CHROMATIC_OCTAVE * octaves + deviation
