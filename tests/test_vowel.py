import unicodedata

import pytest

from glossa.diacritic import PhoneticDiacritic
from glossa.features import Cavity, Phonation
from glossa.pos import Position
from glossa.vowel import Frontness, Height, Roundedness, Vowel


def nfc(text):
    return unicodedata.normalize("NFC", text)


def make_vowel(
    height,
    frontness,
    roundedness=Roundedness.UNROUNDED,
    phonation=Phonation.VOICED,
    cavity=Cavity.ORAL,
    syllabic=True,
):
    return Vowel(
        height=height,
        frontness=frontness,
        roundedness=roundedness,
        phonation=phonation,
        cavity=cavity,
        syllabic=syllabic,
    )


def test_mid_e_nasal_voiceless_non_syllabic():
    vowel = make_vowel(
        Height.MID,
        Frontness.FRONT,
        cavity=Cavity.NASAL,
        phonation=Phonation.VOICELESS,
        syllabic=False,
    )
    assert nfc(str(vowel)) == nfc("ẽ̥̯˕")


def test_mid_e_layout():
    vowel = make_vowel(
        Height.MID,
        Frontness.FRONT,
        cavity=Cavity.NASAL,
        phonation=Phonation.VOICELESS,
        syllabic=False,
    )
    slots = vowel.grapheme_cluster().slots
    assert slots[Position.TOP].diacritics == [PhoneticDiacritic.NASALIZED]
    assert slots[Position.BOTTOM].diacritics == [
        PhoneticDiacritic.VOICELESS,
        PhoneticDiacritic.NON_SYLLABIC,
    ]
    assert slots[Position.RIGHT].diacritics == [PhoneticDiacritic.LOWERED]
    assert slots[Position.LEFT].diacritics == []


def test_plain_close_front_unrounded_is_i():
    assert str(make_vowel(Height.CLOSE, Frontness.FRONT)) == "i"


def test_open_central_is_centralized_a():
    assert str(make_vowel(Height.OPEN, Frontness.CENTRAL)) == "a\u0308"


def test_voiceless_y_avoids_obstructed_top():
    vowel = make_vowel(
        Height.CLOSE,
        Frontness.FRONT,
        roundedness=Roundedness.ROUNDED,
        phonation=Phonation.VOICELESS,
    )
    assert str(vowel) == "y\u0325"


@pytest.mark.parametrize(
    "height, frontness, roundedness",
    [
        (Height.OPEN, Frontness.FRONT, Roundedness.ROUNDED),
        (Height.MID, Frontness.CENTRAL, Roundedness.UNROUNDED),
        (Height.CLOSE, Frontness.BACK, Roundedness.UNROUNDED),
    ],
)
def test_letters_without_hints_raise(height, frontness, roundedness):
    with pytest.raises(ValueError):
        make_vowel(height, frontness, roundedness).grapheme_cluster()


def test_str_matches_cluster():
    vowel = make_vowel(Height.MID, Frontness.BACK, Roundedness.ROUNDED)
    assert str(vowel) == str(vowel.grapheme_cluster())
    assert str(vowel).startswith("o")


def test_vowels_order_by_height_first():
    close = make_vowel(Height.CLOSE, Frontness.FRONT)
    open_ = make_vowel(Height.OPEN, Frontness.BACK)
    assert sorted([close, open_]) == [open_, close]