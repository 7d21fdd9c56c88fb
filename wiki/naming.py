def to_kebab(name: str) -> str:
    """Page name as a url slug: 'My Page' -> 'my-page'"""
    return name.replace(" ", "-").lower()


def kebab_to_title(slug: str) -> str:
    """Heading for a slug: 'my-page' -> 'My Page', "don't-panic" -> "Don't Panic" """
    # All-caps words are kept as acronyms
    words = slug.replace("-", " ").split(" ")
    return " ".join(word if word.isupper() else word.capitalize() for word in words)


def canonical(name: str) -> str:
    """Case-folded form used for lookup equality"""
    return name.casefold()
