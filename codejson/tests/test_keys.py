from codejson.utils import latinize, strip_bom, transform_string_to_key


def test_transform_string_to_key_strips_punctuation_and_stop_word() -> None:
    key = transform_string_to_key("The Code.gov Project")

    assert key == "code_gov_project"
    assert key == key.lower()


def test_transform_string_to_key_collapses_whitespace_and_latinizes() -> None:
    assert transform_string_to_key("Café   Résumé!!") == "cafe_resume_"
    assert transform_string_to_key("Straße") == "strasse"


def test_stop_words_removed_once_only() -> None:
    assert transform_string_to_key("Office of Science of Energy") == "office_science_of_energy"
    assert transform_string_to_key("Research and Development") == "research_development"


def test_latinize() -> None:
    assert latinize("Ångström Æther") == "Angstrom AEther"


def test_strip_bom() -> None:
    assert strip_bom("\ufeff{}") == "{}"
    assert strip_bom("{}") == "{}"
    assert strip_bom(b"\xef\xbb\xbf{\"a\": 1}") == '{"a": 1}'
