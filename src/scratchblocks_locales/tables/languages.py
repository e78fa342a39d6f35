"""Language codes served by the translation server."""

from __future__ import annotations

from typing import Final

ALL_LANGS: Final[tuple[str, ...]] = (
    "ar", "an", "hy", "ast", "eu", "bn_IN", "nb", "bg", "zh_CN",
    "zh_TW", "da", "de", "eo", "et", "fo", "fi", "fr",
    "gl", "ht", "he", "hi", "hch", "id", "ga", "is", "it", "ja",
    "ja_HIRA", "km", "kn", "kk", "ca", "ko", "hr", "ku",
    "cy", "ky", "la", "lv", "lt", "mk", "ms", "ml", "mr", "maz",
    "mn", "my", "nah", "ne", "el", "nl", "no", "nn", "or", "os",
    "oto", "ote", "pap", "fa", "fil", "pl", "pt", "pt_BR", "ro",
    "ru", "rw", "sv", "sr", "sk", "sl", "es", "sw", "tzm", "ta",
    "th", "cs", "tr", "ug", "uk", "hu", "vi",
)

# ISO codes of the languages that have their own discussion forum
FORUM_LANGS: Final[tuple[str, ...]] = (
    "de", "es", "fr", "zh_CN", "zh_TW", "pl", "ja", "nl", "pt", "it",
    "he", "ko", "nb", "tr", "el", "ru", "ca", "id",
)

ALL_KEYWORD: Final[str] = "all"


def is_supported(language: str) -> bool:
    """Return True if the translation server knows ``language``."""
    return language in ALL_LANGS
