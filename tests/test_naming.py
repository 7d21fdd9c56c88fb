from wiki.naming import canonical, kebab_to_title, to_kebab


def test_to_kebab_hyphenates_and_lowercases():
    assert to_kebab("My Page") == "my-page"
    assert to_kebab("Already-Kebab") == "already-kebab"
    assert to_kebab("") == ""


def test_kebab_to_title():
    assert kebab_to_title("my-page") == "My Page"
    assert kebab_to_title("Welcome To Irtysh Wiki") == "Welcome To Irtysh Wiki"


def test_kebab_to_title_keeps_apostrophes_and_acronyms():
    assert kebab_to_title("don't-panic") == "Don't Panic"
    assert kebab_to_title("about-NASA") == "About NASA"
    assert kebab_to_title("") == ""


def test_canonical_folds_case():
    assert canonical("HOME") == canonical("home") == canonical("Home")
    assert canonical("STRASSE") == canonical("straße")
