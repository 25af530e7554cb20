import pytest

from shirur.search.catalog import DEFAULT_SERVICES, load_catalog, load_labels_file
from shirur.search.suggest import SuggestionIndex


def test_catalog_defaults_used_when_config_empty():
    pairs = load_catalog({})
    names = [s["name"] for s in DEFAULT_SERVICES]
    assert [w for w, v in pairs if w == v and w in names] == names
    assert ("Wiring", "Electrician") in pairs


def test_catalog_keywords_plain_and_mapped():
    cfg = {
        "services": [{"name": "Plumber", "keywords": ["Tap Repair"]}],
        "keywords": ["Food", {"word": "Salon", "value": "Beauty Parlor"}, {"word": "Spa"}],
    }
    assert load_catalog(cfg) == [
        ("Plumber", "Plumber"),
        ("Tap Repair", "Plumber"),
        ("Food", "Food"),
        ("Salon", "Beauty Parlor"),
        ("Spa", "Spa"),
    ]


def test_suggest_collapses_synonyms_to_one_entry():
    idx = SuggestionIndex(load_catalog({}))
    # "Plumber", "Pipe Leakage" both map to Plumber
    results = idx.suggest("p")
    assert results.count("Plumber") == 1
    assert "Restaurants" in results  # via "Pizza"
    assert "Cake Shop" in results  # via "Pastry"


def test_suggest_blank_query_hides_panel():
    idx = SuggestionIndex(["Electrician", "Plumber"])
    assert idx.suggest("") == []
    assert idx.suggest("   ") == []
    assert idx.index.search("") == ["Electrician", "Plumber"]


def test_suggest_ignores_leading_whitespace_and_case():
    idx = SuggestionIndex(["Electrician"])
    assert idx.suggest("  ELE") == ["Electrician"]


def test_suggest_limit():
    idx = SuggestionIndex(["Bread", "Butter", "Biscuits", "Bananas"])
    assert idx.suggest("b", limit=2) == ["Bread", "Butter"]
    assert idx.suggest("b", limit=0) == []
    assert len(idx.suggest("b")) == 4


def test_rebuild_swaps_in_fresh_index():
    idx = SuggestionIndex(["Electrician"])
    old = idx.index
    assert idx.rebuild(["Plumber"]) is True
    assert idx.index is not old
    assert idx.suggest("e") == []
    assert idx.suggest("p") == ["Plumber"]
    # a reader still holding the old tree sees it unchanged
    assert old.search("e") == ["Electrician"]


def test_rebuild_skipped_when_label_set_unchanged():
    idx = SuggestionIndex(["Electrician", ("Wiring", "Electrician")])
    current = idx.index
    assert idx.rebuild(["Electrician", ("Wiring", "Electrician")]) is False
    assert idx.index is current


def test_rebuild_skips_empty_labels():
    idx = SuggestionIndex(["", "Plumber"])
    assert len(idx) == 1


def test_load_labels_txt(tmp_path):
    p = tmp_path / "grocery.txt"
    p.write_text("Basmati Rice\n\n  Toor Dal  \nSugar\n", encoding="utf-8")
    assert load_labels_file(p) == ["Basmati Rice", "Toor Dal", "Sugar"]


def test_load_labels_csv(tmp_path):
    p = tmp_path / "grocery.csv"
    p.write_text('name,price\n"Amul Butter, 100g",56\nToor Dal,140\n,10\n', encoding="utf-8")
    assert load_labels_file(p) == ["Amul Butter, 100g", "Toor Dal"]


def test_load_labels_csv_missing_column(tmp_path):
    p = tmp_path / "grocery.csv"
    p.write_text("product,price\nSugar,40\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_labels_file(p)


def test_load_labels_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_labels_file(tmp_path / "nope.txt")


def test_quiet_index_logs_nothing(capsys):
    SuggestionIndex(["Plumber", ("", "Nothing"), (None, "Nothing")], log_level="ERROR")
    assert capsys.readouterr().out == ""


def test_rebuild_skips_non_string_words():
    idx = SuggestionIndex([(None, "Ghost"), ("Tap Repair", "Plumber")], log_level="ERROR")
    assert len(idx) == 1
    assert idx.index.search("") == ["Plumber"]


def test_load_labels_quiet(tmp_path, capsys):
    p = tmp_path / "grocery.txt"
    p.write_text("Sugar\n", encoding="utf-8")
    assert load_labels_file(p, log_level="ERROR") == ["Sugar"]
    assert capsys.readouterr().out == ""
