"""
Unit tests for transliteration strategies and their factory.
"""

import pytest

from postershelf.transliteration import (
    BaseTransliterator,
    TableTransliterator,
    TransliteratorFactory,
    UnidecodeTransliterator,
    get_transliterator,
)

pytestmark = pytest.mark.unit

# Minimum folding every strategy must provide
MINIMUM_MAPPINGS = {
    "àáâãäå": "aaaaaa",
    "ÀÁÂÃÄÅ": "AAAAAA",
    "æ": "ae",
    "Æ": "AE",
    "ç": "c",
    "Ç": "C",
    "èéêë": "eeee",
    "ÈÉÊË": "EEEE",
    "ìíîï": "iiii",
    "ÌÍÎÏ": "IIII",
    "ñ": "n",
    "Ñ": "N",
    "òóôõöø": "oooooo",
    "ÒÓÔÕÖØ": "OOOOOO",
    "ùúûü": "uuuu",
    "ÙÚÛÜ": "UUUU",
    "ýÿ": "yy",
    "ÝŸ": "YY",
    "ß": "ss",
}


@pytest.fixture(params=[TableTransliterator, UnidecodeTransliterator], ids=["table", "unidecode"])
def transliterator(request):
    return request.param()


class TestMinimumCoverage:
    """Both strategies fold Western European letters the same way"""

    @pytest.mark.parametrize("source,expected", list(MINIMUM_MAPPINGS.items()))
    def test_minimum_mapping(self, transliterator, source, expected):
        assert transliterator.transliterate(source) == expected

    def test_ascii_passthrough(self, transliterator):
        assert transliterator.transliterate("Blade Runner 2049") == "Blade Runner 2049"

    def test_empty_string(self, transliterator):
        assert transliterator.transliterate("") == ""

    def test_no_case_folding(self, transliterator):
        assert transliterator.transliterate("ÉCOLE école") == "ECOLE ecole"


class TestTableTransliterator:
    """Static fallback table specifics"""

    def test_latin_extended_a(self):
        t = TableTransliterator()
        assert t.transliterate("Łódź") == "Lodz"
        assert t.transliterate("Œuvre") == "OEuvre"
        assert t.transliterate("Đorđe") == "Dorde"
        assert t.transliterate("Þór") == "THor"

    def test_non_letters_in_block_untouched(self):
        """× and ÷ sit in Latin-1 Supplement but are not letters"""
        t = TableTransliterator()
        assert t.transliterate("2×3÷4") == "2×3÷4"

    def test_other_scripts_untouched(self):
        t = TableTransliterator()
        assert t.transliterate("東京") == "東京"

    def test_custom_table(self):
        t = TableTransliterator({ord("é"): "E"})
        assert t.transliterate("été") == "EtE"


class TestTransliteratorFactory:
    """Test transliterator factory"""

    def setup_method(self):
        TransliteratorFactory._instance = None

    def teardown_method(self):
        TransliteratorFactory.cleanup()

    def test_default_is_unidecode(self):
        transliterator = get_transliterator()
        assert isinstance(transliterator, UnidecodeTransliterator)

    def test_table_from_env(self, monkeypatch):
        monkeypatch.setenv("TRANSLITERATOR_TYPE", "TABLE")
        transliterator = get_transliterator()
        assert isinstance(transliterator, TableTransliterator)

    def test_explicit_type_overrides_env(self, monkeypatch):
        monkeypatch.setenv("TRANSLITERATOR_TYPE", "unidecode")
        transliterator = get_transliterator("table")
        assert isinstance(transliterator, TableTransliterator)

    def test_singleton_caching(self):
        t1 = get_transliterator()
        t2 = get_transliterator()
        assert t1 is t2

    def test_explicit_type_replaces_cached_instance(self):
        t1 = get_transliterator("unidecode")
        t2 = get_transliterator("table")
        assert t1 is not t2
        assert isinstance(t2, TableTransliterator)
        assert get_transliterator() is t2

    def test_force_reload(self):
        t1 = get_transliterator()
        t2 = get_transliterator(force_reload=True)
        assert t1 is not t2

    def test_unknown_type(self, monkeypatch):
        monkeypatch.setenv("TRANSLITERATOR_TYPE", "icu")
        with pytest.raises(ValueError, match="Unknown transliterator type"):
            get_transliterator()

    def test_instances_share_interface(self):
        assert isinstance(get_transliterator("table"), BaseTransliterator)
        assert get_transliterator("table").name == "table"
