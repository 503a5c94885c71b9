import pytest

from lyricsync.core.alignment import TranscriptAligner, align, collapse_sections
from lyricsync.core.models import AlignedEntry, TranscriptWord


def _words(*pairs):
    return [TranscriptWord(text=t, start_ms=ms) for t, ms in pairs]


def test_single_line_match():
    entries = align("Hello world", _words(("hello", 1000), ("world", 1500)))
    assert entries == [AlignedEntry(kind="line", text="Hello world", time=1.0)]


def test_unmatched_line_keeps_cursor():
    words = _words(("hello", 1000), ("world", 1500), ("sing", 3000), ("it", 3200))
    aligner = TranscriptAligner(words)
    results = list(aligner.iter_alignment("Hello world\nNothing matches here\nSing it"))

    times = [entry.time for entry, _ in results]
    cursors = [cursor for _, cursor in results]
    assert times == [1.0, None, 3.0]
    assert cursors == [1, 1, 3]


def test_longer_anchor_beats_earlier_position():
    words = _words(("we", 100), ("x", 200), ("we", 300), ("are", 400), ("young", 500))
    entries = align("We are young", words)
    assert entries[0].time == pytest.approx(0.3)


def test_falls_back_to_shorter_anchor():
    words = _words(("we", 100), ("x", 200), ("we", 300), ("are", 400), ("young", 500))
    entries = align("We are old", words)
    assert entries[0].time == pytest.approx(0.3)


def test_single_token_anchor():
    words = _words(("intro", 0), ("goodbye", 2500))
    entries = align("Goodbye my friend", words)
    assert entries[0].time == pytest.approx(2.5)


def test_search_only_moves_forward():
    words = _words(("alpha", 1000), ("beta", 2000))
    entries = align("Beta\nAlpha", words)
    assert [e.time for e in entries] == [2.0, None]


def test_punctuation_and_case_are_ignored():
    words = _words(("Street,", 5600), ("don't", 6000))
    entries = align("STREET\nDont", words)
    assert [e.time for e in entries] == [5.6, 6.0]


def test_section_lines_and_tokenless_lines():
    words = _words(("hello", 1000))
    entries = align("[Pre Chorus]\n...\n\nHello", words)
    assert entries == [
        AlignedEntry(kind="section", text="prechorus"),
        AlignedEntry(kind="line", text="Hello", time=1.0),
    ]
    assert entries[0].label == "prechorus"
    assert entries[1].label is None


def test_empty_transcript_leaves_lines_untimed():
    entries = align("Hello\nWorld", [])
    assert [e.time for e in entries] == [None, None]


def test_times_never_decrease(sectioned_lyrics, transcript_words):
    entries = align(sectioned_lyrics, transcript_words)
    times = [e.time for e in entries if not e.is_section and e.time is not None]
    assert times == sorted(times)


def test_collapse_sections(sectioned_lyrics, transcript_words):
    lines = collapse_sections(align(sectioned_lyrics, transcript_words))
    assert [(l.time, l.section) for l in lines] == [
        (4.0, "verse1"),
        (8.0, "verse1"),
        (12.0, "chorus"),
        (14.0, "chorus"),
        (20.0, "bridge"),
    ]


def test_collapse_without_sections():
    lines = collapse_sections([AlignedEntry(kind="line", text="la", time=None)])
    assert lines[0].section is None
    assert lines[0].time is None


def test_max_anchor_must_be_positive():
    with pytest.raises(ValueError):
        TranscriptAligner([], max_anchor=0)
