from dataclasses import dataclass


@dataclass(frozen=True)
class Locale:
    code: str
    language_name: str
    # Words joining names in a catalog author list ("and", "as well as").
    author_conjunctions: tuple[str, ...]


LOCALES: dict[str, Locale] = {
    "pl": Locale(
        code="pl",
        language_name="polish",
        author_conjunctions=("i", "oraz"),
    ),
    "cz": Locale(
        code="cz",
        language_name="czech",
        author_conjunctions=("a", "a také", "i"),
    ),
}

DEFAULT_LOCALE = LOCALES["pl"]


def get_locale(code: str) -> Locale:
    try:
        return LOCALES[code.lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported language: {code}. Available: {', '.join(sorted(LOCALES))}"
        ) from None
