"""
Unit tests for term loading and weighted lexical matching.
"""

import json

import pytest

from handlescreen.config import ConfigError
from handlescreen.lexicon_model import Lexicon, Term, load_terms, similarity, tokens


class TestSimilarity:
    """Tests for the string similarity contract."""

    def test_identical(self):
        assert similarity("badword", "badword") == 1.0

    def test_one_edit(self):
        assert similarity("badwrd", "badword") == pytest.approx(6 / 7)

    def test_empty_scores_zero(self):
        assert similarity("", "abc") == 0.0
        assert similarity("abc", "") == 0.0

    def test_range(self):
        assert 0.0 <= similarity("johndoe", "badword") < 0.6


class TestTokens:
    def test_splits_on_non_alphanumerics(self):
        assert tokens("bad word 6x") == ["bad", "word", "6x"]


class TestLexicon:
    """Tests for per-term contributions."""

    def test_substring_and_token_both_count(self):
        """A candidate that is exactly the term scores the weight twice."""
        lex = Lexicon([Term("bad", 10)])
        assert lex.risk("bad") == 20
        kinds = sorted(h["kind"] for h in lex.match("bad"))
        assert kinds == ["substring", "token"]

    def test_substring_only(self):
        lex = Lexicon([Term("badword", 50)])
        assert lex.risk("xbadwordx") == 50

    def test_fuzzy_match_floors(self):
        lex = Lexicon([Term("badword", 50)])
        hits = lex.match("badwrd")
        assert hits == [{"term": "badword", "kind": "fuzzy", "points": 42}]

    def test_fuzzy_below_threshold_ignored(self):
        lex = Lexicon([Term("badword", 50)])
        assert lex.risk("johndoe") == 0

    def test_leet_candidate_reaches_term(self):
        lex = Lexicon([Term("badword", 50)])
        assert lex.risk("badword") == 100

    def test_token_compares_raw_term_text(self):
        """Token matches use the term as configured, not its normalized form."""
        lex = Lexicon([Term("B4d", 10)])
        assert lex.risk("bad") == 10

    def test_terms_sum(self):
        lex = Lexicon([Term("bad", 10), Term("word", 5)])
        assert lex.risk("badword") == 15

    def test_term_normalizing_to_empty_never_matches(self):
        lex = Lexicon([Term("!!!", 10)])
        assert lex.risk("anything") == 0


class TestLoadTerms:
    """Tests for the term dictionary loader."""

    def _write(self, tmp_path, payload):
        p = tmp_path / "terms.json"
        p.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
        return str(p)

    def test_valid(self, tmp_path):
        path = self._write(tmp_path, [{"term": "badword", "weight": 50}, {"term": "idiot", "weight": 30}])
        assert load_terms(path) == [Term("badword", 50), Term("idiot", 30)]

    def test_lexicon_load(self, tmp_path):
        path = self._write(tmp_path, [{"term": "bad", "weight": 10}])
        assert Lexicon.load(path).risk("bad") == 20

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_terms(str(tmp_path / "nope.json"))

    def test_malformed_json(self, tmp_path):
        with pytest.raises(ConfigError):
            load_terms(self._write(tmp_path, "[{"))

    def test_not_a_list(self, tmp_path):
        with pytest.raises(ConfigError):
            load_terms(self._write(tmp_path, {"term": "bad", "weight": 1}))

    @pytest.mark.parametrize("weight", [0, -3, 1.5, "10", True, None])
    def test_bad_weight(self, tmp_path, weight):
        with pytest.raises(ConfigError):
            load_terms(self._write(tmp_path, [{"term": "bad", "weight": weight}]))

    def test_missing_term(self, tmp_path):
        with pytest.raises(ConfigError):
            load_terms(self._write(tmp_path, [{"weight": 3}]))
