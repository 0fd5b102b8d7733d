import pytest

from audiomatch.matching.normalizer import normalize


class TestNormalize:
    def test_lowercases_and_strips_diacritics(self):
        assert normalize("Wielka Podróż") == "wielka podroz"

    def test_punctuation_becomes_space(self):
        assert normalize("Pan Tadeusz, czyli... ostatni zajazd!") == "pan tadeusz czyli ostatni zajazd"

    def test_collapses_and_trims_whitespace(self):
        assert normalize("  Lalka \t\n  tom   1  ") == "lalka tom 1"

    def test_keeps_underscore_and_digits(self):
        assert normalize("Crème_brûlée 2024") == "creme_brulee 2024"

    def test_letters_without_decomposition_are_kept(self):
        assert normalize("Łódź") == "łodz"

    def test_empty_string(self):
        assert normalize("") == ""

    def test_only_punctuation(self):
        assert normalize("?!-- ...") == ""

    @pytest.mark.parametrize(
        "text",
        [
            "Wielka Podróż (2021) [audiobook PL]",
            "  Ćma, Żółw & Źrebię  ",
            "Příliš žluťoučký kůň",
            "İstanbul",
            "",
        ],
    )
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once
