from __future__ import annotations

import pytest

from pastemyst.languages import (
    DISCORD_LANGUAGES,
    PasteMystLanguage,
    discord_to_pastemyst_language,
    is_known_tag,
)


@pytest.mark.parametrize(
    "tag, expected",
    [
        ("cs", "csharp"),
        ("javascript", "javascript"),
        ("js", "javascript"),
        ("JS", "javascript"),
        ("Php", "php"),
        ("py", "python"),
        ("c++", "cpp"),
        ("  ts ", "typescript"),
    ],
)
def test_known_tags(tag: str, expected: str) -> None:
    assert discord_to_pastemyst_language(tag) == expected


@pytest.mark.parametrize("tag", ["Some nonexisting language", "jarvorscropt", "", None, 34])
def test_unknown_tags_return_unknown(tag) -> None:
    assert discord_to_pastemyst_language(tag) == "Unknown"
    assert not is_known_tag(tag)


def test_aliases_point_at_real_languages() -> None:
    languages = {language.value for language in PasteMystLanguage}
    for alias, language in DISCORD_LANGUAGES.items():
        assert alias == alias.lower()
        assert language in languages
        assert language != PasteMystLanguage.UNKNOWN.value


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        DISCORD_LANGUAGES["cs"] = "java"
