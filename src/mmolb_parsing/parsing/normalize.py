"""Lexical normalisation and segmentation of raw feed text."""

from __future__ import annotations

import re

from mmolb_parsing.domain.raw_play import RawPlay
from mmolb_parsing.domain.season import PlaySource

_LINE_BREAK = re.compile(r"<br\s*/?>", re.IGNORECASE)
_MARKUP = re.compile(r"</?(?:strong|b|em|i)\s*>", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")
_SENTENCE_END = re.compile(r"[.!?](?= |$)")
_NAME_ABBREVIATIONS = frozenset({"Jr", "Sr", "St", "Dr"})


def normalize(text: str) -> str:
    """Strip inline markup, fold every whitespace run to one space, and trim."""
    without_markup = _MARKUP.sub("", _LINE_BREAK.sub(" ", text))
    return _WHITESPACE.sub(" ", without_markup).strip()


def _closes_initial(text: str, stop: int) -> bool:
    word = text[:stop].rsplit(" ", 1)[-1]
    return (len(word) == 1 and word.isupper()) or word in _NAME_ABBREVIATIONS


def split_sentences(text: str) -> tuple[str, ...]:
    """Split normalised text into sentences, keeping terminal punctuation.

    A period after a name initial (``J. R. Smith``) or a name suffix
    (``Jr.``) does not end a sentence unless it ends the text.
    """
    sentences: list[str] = []
    start = 0
    for match in _SENTENCE_END.finditer(text):
        stop = match.start()
        if match.group() == "." and match.end() < len(text) and _closes_initial(text, stop):
            continue
        sentence = text[start : match.end()].strip()
        if sentence:
            sentences.append(sentence)
        start = match.end()
    tail = text[start:].strip()
    if tail:
        sentences.append(tail)
    return tuple(sentences)


def split_plays(document: str, season: str, source: PlaySource = PlaySource.GAME) -> list[RawPlay]:
    """One RawPlay per non-blank line of ``document``, with UTF-8 byte offsets."""
    plays: list[RawPlay] = []
    offset = 0
    for line in document.split("\n"):
        content = line.removesuffix("\r")
        if content.strip():
            plays.append(RawPlay(text=content, season=season, source=source, start=offset))
        offset += len(line.encode("utf-8", "surrogatepass")) + 1
    return plays
