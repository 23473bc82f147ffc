"""
A module that turns raw text into the words (tokens) that the line-break
    algorithms work with.

A token is a maximal run of non-whitespace characters. Whitespace is only ever
    used to tell where one token ends and the next begins, so none of it
    survives into the tokens (or into the lines that are made out of them).

The scanner reads its input a chunk at a time and never rewinds it, so it works
    just as well on a huge file as it does on a short string.
"""
from typing import Callable, Generator, List, Union, TextIO

WHITESPACE_CHARS = ' \t\r\n'
WHITESPACE = set(ch for ch in WHITESPACE_CHARS)
CHUNK_SIZE = 4096 # how many characters to read from a stream at a time

# Character classes
WORD, WHITESPACE_CLASS, IGNORED = 'WORD', 'WHITESPACE', 'IGNORED'

Source = Union[str, TextIO]


def classify(ch:str) -> str:
    """
    Returns the class of the given character: WHITESPACE_CLASS for a space,
        tab, carriage return or line feed and WORD for everything else.

    This default never returns IGNORED, but a classifier given to scan() can.
    """
    if ch in WHITESPACE:
        return WHITESPACE_CLASS
    return WORD


def chunks(source:Source, size:int=CHUNK_SIZE) -> Generator[str, None, None]:
    """
    Yields the given source a piece at a time. A str is yielded whole, anything
        else is assumed to have a read(n) method like a file does.
    """
    if isinstance(source, str):
        if source:
            yield source
        return

    while True:
        chunk = source.read(size)
        if not chunk:
            break
        yield chunk


def scan(source:Source, classify:Callable[[str], str]=classify) -> Generator[str, None, None]:
    """
    Lazily yields the tokens of the given text, in the order they appear in it.

    source: A str or a readable text stream. Streams are read in CHUNK_SIZE
        pieces and a token that spans two pieces is still yielded whole.

    classify: Function that maps one character to WORD, WHITESPACE_CLASS or
        IGNORED. WORD characters are collected into tokens. The other two
        are dropped and end whatever token was being collected.
    """
    word:List[str] = [] # characters of the token currently being collected

    for chunk in chunks(source):
        for ch in chunk:
            if classify(ch) == WORD:
                word.append(ch)
            elif word:
                # whitespace or an ignored character ends the token
                yield ''.join(word)
                word = []

    # End of input
    if word:
        yield ''.join(word)


def tokenize(source:Source, classify:Callable[[str], str]=classify) -> List[str]:
    """
    Same as scan() but returns all of the tokens at once as a list.
    """
    return list(scan(source, classify))
