"""Tests for text segmentation and per-family classification."""

import pytest

from pysuperscript.segmenter import has_annotations, segment
from pysuperscript.types import Segment, Trace


def plain(content: str) -> Segment:
    return Segment("plain", content)


def sup(content: str) -> Segment:
    return Segment("super", content)


def sub(content: str) -> Segment:
    return Segment("sub", content)


@pytest.mark.parametrize(
    ("text", "ordinals", "expected"),
    [
        ("Acme(TM) rocks", True, [plain("Acme"), sup("™"), plain(" rocks")]),
        (
            "Water is H2O today.",
            True,
            [plain("Water is "), plain("H"), sub("2"), plain("O today.")],
        ),
        (
            "Finished 3rd overall",
            True,
            [plain("Finished "), plain("3"), sup("rd"), plain(" overall")],
        ),
        ("E = mc^2", True, [plain("E = mc"), sup("2")]),
        (
            "Copyright (C) 2024 Acme",
            True,
            [plain("Copyright "), plain("©"), plain(" 2024 Acme")],
        ),
        ("No patterns here", False, [plain("No patterns here")]),
    ],
)
def test_reference_scenarios(text, ordinals, expected):
    assert segment(text, ordinals_enabled=ordinals) == expected


class TestSymbols:
    """Trademark, registered and copyright marks."""

    @pytest.mark.parametrize("mark", ["™", "(TM)", "TM"])
    def test_trademark_variants_canonicalize(self, mark):
        assert segment(f"Acme {mark}") == [plain("Acme "), sup("™")]

    def test_bare_tm_inside_word_is_ignored(self):
        assert segment("Use the ATM machine") == [plain("Use the ATM machine")]
        assert segment("TMobile") == [plain("TMobile")]

    def test_bare_tm_next_to_punctuation(self):
        assert segment("Brand TM.") == [plain("Brand "), sup("™"), plain(".")]

    @pytest.mark.parametrize("mark", ["®", "(R)"])
    def test_registered_variants(self, mark):
        assert segment(f"Acme{mark} Inc") == [plain("Acme"), sup("®"), plain(" Inc")]

    def test_registered_double_paren_is_left_alone(self):
        assert segment("Acme(R)) Inc") == [plain("Acme(R)) Inc")]

    def test_copyright_is_never_raised(self):
        segments = segment("(C) 2024 and © 2025")

        assert segments == [plain("©"), plain(" 2024 and "), plain("©"), plain(" 2025")]
        assert not has_annotations(segments)

    def test_copyright_double_paren_is_left_alone(self):
        assert segment("see (C))") == [plain("see (C))")]

    def test_leftmost_symbol_consumes_trailing_digits(self):
        assert segment("(C)2") == [plain("©"), plain("2")]
        assert segment("(TM)2") == [sup("™"), plain("2")]


class TestOrdinals:
    def test_all_suffixes(self):
        assert segment("1st 2nd 3rd 4th") == [
            plain("1"),
            sup("st"),
            plain(" "),
            plain("2"),
            sup("nd"),
            plain(" "),
            plain("3"),
            sup("rd"),
            plain(" "),
            plain("4"),
            sup("th"),
        ]

    def test_multi_digit(self):
        assert segment("the 101st run") == [
            plain("the "),
            plain("101"),
            sup("st"),
            plain(" run"),
        ]

    def test_partial_words_do_not_match(self):
        assert segment("the 21stcentury") == [plain("the 21stcentury")]
        assert segment("a1st") == [plain("a1st")]

    def test_disabled(self):
        assert segment("Finished 3rd", ordinals_enabled=False) == [
            plain("Finished 3rd")
        ]


class TestChemistry:
    def test_two_letter_element(self):
        assert segment("Ca3") == [plain("Ca"), sub("3")]

    def test_sulfate(self):
        assert segment("SO4") == [plain("S"), plain("O"), sub("4")]

    def test_trailing_parenthesis(self):
        assert segment("Ca(OH)2") == [plain("Ca(OH"), plain(")"), sub("2")]

    def test_element_and_parenthesis_in_one_formula(self):
        assert segment("Ca3(PO4)2") == [
            plain("Ca"),
            sub("3"),
            plain("(P"),
            plain("O"),
            sub("4"),
            plain(")"),
            sub("2"),
        ]

    def test_capitalized_codes_are_treated_as_elements(self):
        # Shallow heuristic: no periodic-table validation.
        assert segment("Q4 results") == [plain("Q"), sub("4"), plain(" results")]


class TestMath:
    def test_braced_superscript(self):
        assert segment("x^{10}") == [plain("x"), sup("10")]

    def test_braced_subscript(self):
        assert segment("x_{i+1} + y_2") == [
            plain("x"),
            sub("i+1"),
            plain(" + y"),
            sub("2"),
        ]

    def test_caret_without_operand_is_plain(self):
        assert segment("x^n and a_b") == [plain("x^n and a_b")]

    def test_subscript_after_element_letter(self):
        assert segment("H_{2}O") == [plain("H"), sub("2"), plain("O")]

    def test_empty_operand_degrades_to_plain(self):
        trace = Trace()

        segments = segment("x^{{}", trace=trace)

        assert segments == [plain("x"), plain("^{{}")]
        assert len(trace.warnings) == 1
        assert "math_super" in trace.warnings[0]


class TestProperties:
    SAMPLES = [
        "",
        "plain",
        "Acme(TM) and Foo(R) (C) 2024",
        "Ca3(PO4)2 on the 2nd of May, x^{2} + y_1",
        "ATM (R)) (C)) 21stcentury x^n",
        "™®© H2O^2_3",
    ]

    @pytest.mark.parametrize("text", SAMPLES)
    def test_segments_cover_input_in_order(self, text):
        segments = segment(text)

        assert segments
        assert segments[0].source_start == 0
        assert segments[-1].source_end == len(text)
        for left, right in zip(segments, segments[1:]):
            assert left.source_end == right.source_start
            assert left.source_start <= left.source_end

    @pytest.mark.parametrize("text", SAMPLES)
    def test_annotations_are_never_empty(self, text):
        for seg in segment(text):
            if seg.is_annotation:
                assert seg.content

    @pytest.mark.parametrize(
        ("text", "flattened"),
        [
            ("Acme(TM) and Foo(R) (C) 2024", "Acme™ and Foo® © 2024"),
            ("Ca3(PO4)2 on the 2nd, x^{2} + y_1", "Ca3(PO4)2 on the 2nd, x2 + y1"),
            ("ATM (R)) (C)) x^n", "ATM (R)) (C)) x^n"),
        ],
    )
    def test_contents_reconstruct_normalized_input(self, text, flattened):
        assert "".join(seg.content for seg in segment(text)) == flattened

    @pytest.mark.parametrize("symbol", ["™", "®", "©"])
    def test_canonical_symbols_are_fixed_points(self, symbol):
        first = segment(symbol)

        assert len(first) == 1
        assert first[0].content == symbol
        assert segment(first[0].content) == first

    def test_symbol_canonicalization_is_idempotent(self):
        first = segment("Acme(TM) and (C)")
        again = segment("".join(seg.content for seg in first))

        assert again == first

    def test_empty_input(self):
        assert segment("") == [plain("")]

    def test_no_match_returns_single_span(self):
        (only,) = segment("Nothing to see")

        assert only == plain("Nothing to see")
        assert (only.source_start, only.source_end) == (0, 14)
