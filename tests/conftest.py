import pytest

SHORT_TEXT = """Among other public buildings in a certain town, which for many reasons it will be prudent to refrain from mentioning, and to which I will assign no fictitious name, there is one anciently common to most towns, great or small: to wit, a workhouse; and in this workhouse was born; on a day and date which I need not trouble myself to repeat, inasmuch as it can be of no possible consequence to the reader, in this stage of the business at all events; the item of mortality whose name is prefixed to the head of this chapter."""

RAGGED_TEXT = """
        Although I am not disposed to maintain that the being born in a
        workhouse, is in itself the most fortunate and enviable circumstance
\tthat can possibly befall a human being,\r\nI do mean to say that in this
        particular instance, it was the best thing for Oliver Twist that could
        by possibility have occurred.   sevenpence-halfpenny’s   worth\t\t
"""

LONG_WORDS_TEXT = "a supercalifragilisticexpialidocious b c antidisestablishmentarianism d"

SAMPLE_TEXTS = {
    'short': SHORT_TEXT,
    'ragged': RAGGED_TEXT,
    'long_words': LONG_WORDS_TEXT,
    'single': 'word',
    'blank': ' \t\r\n ',
    'empty': '',
}


@pytest.fixture(params=sorted(SAMPLE_TEXTS))
def sample_text(request):
    return SAMPLE_TEXTS[request.param]
