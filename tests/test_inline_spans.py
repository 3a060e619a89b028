from frame_markup import InlineSpan, parse_inline


def test_plain_text():
    assert parse_inline("just text") == [InlineSpan("text", "just text")]


def test_empty_and_none():
    assert parse_inline("") == []
    assert parse_inline(None) == []


def test_multiple_bold_spans_are_not_greedy():
    assert parse_inline("**a** and **b**") == [
        InlineSpan("bold", "a"),
        InlineSpan("text", " and "),
        InlineSpan("bold", "b"),
    ]


def test_unmatched_bold_marker_stays_plain():
    assert parse_inline("2 ** 3 is eight") == [InlineSpan("text", "2 ** 3 is eight")]


def test_odd_bold_marker_after_pair_stays_plain():
    assert parse_inline("**x** then **y") == [
        InlineSpan("bold", "x"),
        InlineSpan("text", " then **y"),
    ]


def test_url_inside_bold_is_not_linked():
    assert parse_inline("**https://example.com**") == [
        InlineSpan("bold", "https://example.com"),
    ]


def test_url_runs_until_whitespace():
    spans = parse_inline("Watch https://youtu.be/abc?t=1, then read.")
    assert spans == [
        InlineSpan("text", "Watch "),
        InlineSpan("link", "https://youtu.be/abc?t=1,"),
        InlineSpan("text", " then read."),
    ]
    assert spans[1].url == "https://youtu.be/abc?t=1,"
    assert spans[0].url is None


def test_scheme_without_host_is_plain():
    assert parse_inline("see http:// later") == [InlineSpan("text", "see http:// later")]


def test_two_urls_back_to_back():
    assert parse_inline("http://a.io https://b.io") == [
        InlineSpan("link", "http://a.io"),
        InlineSpan("text", " "),
        InlineSpan("link", "https://b.io"),
    ]


def test_bold_delimiters_reinserted_rebuild_input():
    text = "Use **f(x)** from http://x.y and **g**!"
    rebuilt = "".join(
        f"**{s.text}**" if s.kind == "bold" else s.text
        for s in parse_inline(text)
    )
    assert rebuilt == text
