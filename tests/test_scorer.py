"""
Tests de normalización y similitud.
"""
import pytest

from trebekbot.scorer import Role, normalize_for_comparison, similarity, strip_html


class TestNormalizeSubmission:
    """Normalización de lo que escribe el usuario."""

    def test_full_question(self):
        assert normalize_for_comparison("What is a dog?", Role.SUBMISSION) == "dog"

    @pytest.mark.parametrize("raw,expected", [
        ("whats the moon", "moon"),
        ("Where are the Alps?", "alps"),
        ("WHO WAS Lincoln", "lincoln"),
        ("who's the boss?", "boss"),
        ("dirt", "dirt"),
    ])
    def test_prefixes(self, raw, expected):
        assert normalize_for_comparison(raw, Role.SUBMISSION) == expected

    def test_each_prefix_stripped_once(self):
        """Sólo se saca un prefijo de cada tipo."""
        assert normalize_for_comparison("what is the the band", Role.SUBMISSION) == "the band"
        assert normalize_for_comparison("what is is", Role.SUBMISSION) == "is"

    def test_order_is_interrogative_copula_article(self):
        # "is" antes de "what" no cuenta como interrogativo
        assert normalize_for_comparison("is what a dog", Role.SUBMISSION) == "what a dog"

    def test_an_is_not_stripped_from_submissions(self):
        assert normalize_for_comparison("what is an apple", Role.SUBMISSION) == "an apple"


class TestNormalizeAnswer:
    """Normalización de la respuesta correcta."""

    def test_article_and_case(self):
        assert normalize_for_comparison("The Dog", Role.ANSWER) == "dog"

    def test_an(self):
        assert normalize_for_comparison("an Apple", Role.ANSWER) == "apple"

    def test_punctuation(self):
        assert normalize_for_comparison("St. Louis, Missouri!", Role.ANSWER) == "st louis missouri"

    def test_interrogatives_kept(self):
        assert normalize_for_comparison("The Who", Role.ANSWER) == "who"


class TestStripHtml:
    def test_tags_and_entities(self):
        assert strip_html("<i>Hamlet</i> &amp; Ophelia") == "Hamlet & Ophelia"

    def test_none(self):
        assert strip_html(None) == ""


class TestSimilarity:
    """Similitud de pares de letras."""

    def test_identical(self):
        assert similarity("dog", "dog") == 1.0

    def test_disjoint(self):
        assert similarity("dog", "cat") < 0.5

    def test_article_does_not_hurt(self):
        assert similarity("a dog", "dog") >= 0.5

    def test_symmetric(self):
        assert similarity("france", "french") == similarity("french", "france")

    def test_empty(self):
        assert similarity("", "dog") == 0.0
        assert similarity("dog", "") == 0.0
        assert similarity("", "") == 0.0

    def test_identical_whitespace(self):
        assert similarity("   ", "   ") == 1.0

    def test_single_letters(self):
        assert similarity("x", "x") == 1.0
        assert similarity("x", "y") == 0.0

    def test_more_shared_words_scores_higher(self):
        one = similarity("george washington carver", "george")
        two = similarity("george washington carver", "george washington")
        assert one < two < 1.0

    def test_known_value(self):
        # FR RA AN NC CE vs FR RE EN NC CH -> FR, NC compartidos
        assert similarity("france", "french") == pytest.approx(0.4)
