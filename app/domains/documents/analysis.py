"""Метрики текста.

Чистые функции без ввода-вывода. Любая строка, включая пустую, является
допустимым входом: функции не бросают исключений. None в качестве текста
должен быть заменен на "" вызывающей стороной.
"""
import re
from typing import List

WORD_PATTERN = re.compile(r"\b[\w']+\b")
WHITESPACE_PATTERN = re.compile(r"\s+")
PUNCTUATION_PATTERN = re.compile(r"[.,!?;:()'\"`]")
SENTENCE_SEPARATOR = re.compile(r"[.!?]+")
PARAGRAPH_SEPARATOR = re.compile(r"\n+")


def count_words(text: str) -> int:
    """Подсчет слов; сокращения вида it's считаются одним словом"""
    if not text:
        return 0
    return len(WORD_PATTERN.findall(text))


def count_characters(text: str, exclude_punctuation: bool = False) -> int:
    """Подсчет символов без пробельных (в кодовых точках Unicode)"""
    if not text:
        return 0
    processed = WHITESPACE_PATTERN.sub("", text)
    if exclude_punctuation:
        processed = PUNCTUATION_PATTERN.sub("", processed)
    return len(processed)


def _count_fragments(text: str, separator: re.Pattern) -> int:
    return sum(1 for fragment in separator.split(text) if fragment.strip())


def count_sentences(text: str) -> int:
    """Подсчет предложений по сериям . ! ?"""
    if not text:
        return 0
    return _count_fragments(text, SENTENCE_SEPARATOR)


def count_paragraphs(text: str) -> int:
    """Подсчет абзацев: несколько пустых строк подряд равны одной"""
    if not text:
        return 0
    return _count_fragments(text, PARAGRAPH_SEPARATOR)


def longest_words(text: str) -> List[str]:
    """Самые длинные слова текста.

    Несмотря на исторический смысл "по абзацам", максимум ищется по всему
    тексту сразу. Возвращаются все слова максимальной длины без повторов
    (без учета регистра) в порядке первого появления.
    """
    if not text:
        return []

    normalized = PUNCTUATION_PATTERN.sub("", text.lower())
    words = normalized.split()
    if not words:
        return []

    max_length = max(len(word) for word in words)
    return list(dict.fromkeys(word for word in words if len(word) == max_length))
