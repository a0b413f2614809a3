"""The table of text encodings offered to the user, grouped by language."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TextEncoding:
    """A codec name together with the language group it belongs to."""

    language: str
    codec: str


_ENCODINGS: tuple[TextEncoding, ...] = tuple(
    TextEncoding(language, codec)
    for language, codec in (
        ("Arabic", "CP1256"),
        ("Baltic", "CP1257"),
        ("Central European", "CP1250"),
        ("Chinese Simplified", "GB18030"),
        ("Chinese Simplified", "GBK"),
        ("Chinese Simplified", "GB2313"),
        ("Chinese Simplified", "UTF-8/GBK"),
        ("Chinese Simplified", "GBK/UTF-8"),
        ("Chinese Traditional", "Big5"),
        ("Chinese Traditional", "Big5-HKSCS"),
        ("Cyrillic", "CP1251"),
        ("Cyrillic", "KOI8-R"),
        ("Cyrillic Broken", "CP1251/KOI8-R"),
        ("Cyrillic Broken", "KOI8-R/CP1251"),
        ("Greek", "CP1253"),
        ("Hebrew", "CP1255"),
        ("Japanese", "Shift-JIS"),
        ("Japanese", "eucJP"),
        ("Japanese", "JIS7"),
        ("Korean", "eucKR"),
        ("Tamil", "TSCII"),
        ("Thai", "TIS-620"),
        ("Ukrainian", "KOI8-U"),
        ("Turkish", "CP1254"),
        ("Vietnamese", "CP1258"),
        ("Unicode", "UTF-8"),
        ("Unicode", "UTF-16"),
        ("Western", "CP1252"),
    )
)


def supported_encodings() -> tuple[TextEncoding, ...]:
    """Return every supported encoding in display order."""
    return _ENCODINGS


def language_for_codec(codec: str) -> str:
    """Return the language group of a codec, or "Unknown" if it is not listed."""
    return next((e.language for e in _ENCODINGS if e.codec == codec), "Unknown")