"""
Implements the code for a rigid greedy line-break algorithm i.e. an algorithm
    for text where it is assumed every character (including spaces) is exactly
    1 character long.

The algorithm makes a single pass over the words from left to right. Each word
    is put on the current line if it fits there, otherwise the current line is
    finished and the word starts the next one. Past decisions are never
    reconsidered.
"""
from io import StringIO
from typing import Final, Iterable, List, Literal, Union

from scanner import scan
from tools import profile


class WidthError(ValueError):
    """
    Raised when a line-break is asked for with a width that is not a positive
        integer.
    """


def text_len(line:List[str]) -> int:
    """
    Returns how many characters the given line takes up once its words are
        joined by single spaces.
    """
    if not line:
        return 0
    cnt = len(line) - 1 # the spaces
    for t in line: cnt += len(t)
    return cnt


def render_line(line:List[str]) -> str:
    return ' '.join(line)


def check_width(width:int) -> None:
    if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
        raise WidthError(f'Unable To Break Text: The width must be a positive integer, not {width!r}.')


@profile()
def greedy_break(
        text:Union[str, Iterable[str]],
        width:int,
    ) -> List[List[str]]:
    """
    Breaks lines greedily, assuming that all characters (including spaces) are
        exactly 1 unit long. The broken up paragraph is returned as a list of
        lists of strings, where each inner list is the words that make up one
        line of the text.

    text: The words of the paragraph. If a string is given, it is tokenized on
        whitespace first, otherwise every string in the given iterable is
        assumed to be 1 word and is never changed, split or dropped.

    width: The width to fit the text in. A word is only added to the end of a
        line if it leaves at least one column of the width unused, so a line
        with more than one word on it is always shorter than `width`. A word
        that is too long to fit even by itself gets a line of its own that is
        longer than `width`.

    With no words at all, the result is a paragraph of one empty line.
    """
    check_width(width)

    space:Final[Literal[1]] = 1 # constant used instead of magic number

    words:Iterable[str] = scan(text) if isinstance(text, str) else text

    lines:List[List[str]] = [] # each inner list is one finished line of words
    curr_line:List[str] = []   # starts out as the (empty) first line
    w:int = width              # width left on the current line

    for word in words:
        cost = len(word)
        if curr_line:
            cost += space # the space that separates it from the previous word

        if cost < w:
            # Fits and still leaves at least one column free
            curr_line.append(word)
            w -= cost
        else:
            # Does not fit, so it starts the next line. The line being closed
            # can only be empty if this is the very first word.
            if curr_line:
                lines.append(curr_line)
            curr_line = [word]
            w = width - len(word)

    # The last line is kept even when empty
    lines.append(curr_line)

    return lines


# -----------------------------------------------------------------------------
# Format Methods
# =============================================================================


def render_lines(paragraph:List[List[str]], width:int, fill_char:str=' ', line_end:str='\n') -> str:
    """
    Left justifies the given paragraph and writes the length of every line
        after it, i.e. "some words   10". Lines that are longer than the width
        get no fill.
    """
    text = StringIO()
    for line in paragraph:
        line_str = render_line(line)
        text.write(line_str + (fill_char * (width - len(line_str))) + ' ' + str(len(line_str)) + line_end)
    return text.getvalue()
